# fitsense/routers/fitness.py
import uuid

from fastapi import APIRouter, Depends, Request

from fitsense.models.fitness import FitnessFormOptions, FitnessRequest, FitnessResult, FormOption
from fitsense.services.fitness_service import FitnessService, get_fitness_service

router = APIRouter(prefix="/api/fitness", tags=["Fitness"])

SESSION_ID_KEY = "sessionId"

# ====== Form options ======
ACTIVITY_LEVEL_OPTIONS = [
    FormOption(value="Sedentary", label="Sedentary (little to no exercise)"),
    FormOption(value="Lightly Active", label="Lightly Active (light exercise 1-3 days/week)"),
    FormOption(value="Active", label="Active (moderate exercise 3-5 days/week)"),
    FormOption(value="Very Active", label="Very Active (hard exercise 6-7 days/week)"),
]

LANGUAGE_OPTIONS = [
    FormOption(value="English", label="English"),
    FormOption(value="Hindi", label="हिंदी (Hindi)"),
]

HEIGHT_UNIT_OPTIONS = [
    FormOption(value="cm", label="cm"),
    FormOption(value="ft", label="ft"),
    FormOption(value="inch", label="inch"),
]


def get_session_id(request: Request) -> str:
    """Stable id for this browser, kept in the session cookie"""
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_ID_KEY] = session_id
    return session_id


@router.get("/options", response_model=FitnessFormOptions)
def get_form_options(session_id: str = Depends(get_session_id)):
    # Issue the session id with the form so the first submit is already tracked
    return FitnessFormOptions(
        activity_levels=ACTIVITY_LEVEL_OPTIONS,
        languages=LANGUAGE_OPTIONS,
        height_units=HEIGHT_UNIT_OPTIONS,
        default_height_unit="cm",
        default_language="English",
    )


@router.post("/calculate", response_model=FitnessResult)
async def calculate_fitness(
    data: FitnessRequest,
    session_id: str = Depends(get_session_id),
    service: FitnessService = Depends(get_fitness_service),
):
    return await service.calculate(session_id, data)
