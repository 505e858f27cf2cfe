# fitsense/services/fitness_service.py
import asyncio
import logging
import time
from typing import Optional, Set

from fastapi import HTTPException, status

from fitsense.config import get_settings
from fitsense.models.fitness import FitnessRequest, FitnessResult
from fitsense.services.advice_service import AdviceClient
from fitsense.services.metrics_service import calculate_metrics

logger = logging.getLogger(__name__)


class CalculationState:
    """Sessions with a calculation in flight"""

    def __init__(self):
        self._in_flight: Set[str] = set()

    def begin(self, session_id: str) -> bool:
        if session_id in self._in_flight:
            return False
        self._in_flight.add(session_id)
        return True

    def finish(self, session_id: str):
        self._in_flight.discard(session_id)

    def is_calculating(self, session_id: str) -> bool:
        return session_id in self._in_flight


class FitnessService:
    """Runs one calculation: metrics, then advice, then the combined result"""

    def __init__(
        self,
        advice_client: AdviceClient,
        min_duration: float = 0.0,
        state: Optional[CalculationState] = None,
    ):
        self.advice_client = advice_client
        self.min_duration = max(0.0, min_duration)
        self.state = state or CalculationState()

    async def calculate(self, session_id: str, data: FitnessRequest) -> FitnessResult:
        if not self.state.begin(session_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="A calculation is already in progress",
            )

        started = time.monotonic()
        try:
            metrics = calculate_metrics(data.weight, data.height, data.height_unit, data.activity_level)
            logger.info(
                f"Calculated BMI {metrics.bmi} ({metrics.bmi_category}), "
                f"{metrics.daily_calories} kcal for session {session_id[:8]}"
            )

            advice = await self.advice_client.get_fitness_advice(
                metrics.raw_bmi, metrics.bmi_category, data.activity_level, data.language
            )
            if advice.fallback:
                logger.warning(f"Using fallback suggestions for session {session_id[:8]}")

            await self._wait_for_minimum(started)

            return FitnessResult(
                bmi=metrics.bmi,
                bmi_category=metrics.bmi_category,
                daily_calories=metrics.daily_calories,
                suggestions=advice.suggestions,
            )
        finally:
            self.state.finish(session_id)

    async def _wait_for_minimum(self, started: float):
        remaining = self.min_duration - (time.monotonic() - started)
        if remaining > 0:
            await asyncio.sleep(remaining)


_fitness_service: Optional[FitnessService] = None


def get_fitness_service() -> FitnessService:
    global _fitness_service
    if _fitness_service is None:
        settings = get_settings()
        _fitness_service = FitnessService(
            advice_client=AdviceClient.from_settings(settings),
            min_duration=settings.MIN_CALCULATION_SECONDS,
        )
    return _fitness_service
