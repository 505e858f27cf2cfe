# fitsense/routers/preferences.py
from fastapi import APIRouter, Depends, Request

from fitsense.models.preferences import ThemePreference
from fitsense.services.preference_service import PreferenceStore

router = APIRouter(prefix="/api/preferences", tags=["Preferences"])


def get_preference_store(request: Request) -> PreferenceStore:
    return PreferenceStore(request.session)


@router.get("/theme", response_model=ThemePreference)
def get_theme(store: PreferenceStore = Depends(get_preference_store)):
    return ThemePreference(dark_mode=store.read_dark_mode())


@router.put("/theme", response_model=ThemePreference)
def set_theme(preference: ThemePreference, store: PreferenceStore = Depends(get_preference_store)):
    return ThemePreference(dark_mode=store.write_dark_mode(preference.dark_mode))


@router.post("/theme/toggle", response_model=ThemePreference)
def toggle_theme(store: PreferenceStore = Depends(get_preference_store)):
    return ThemePreference(dark_mode=store.toggle_dark_mode())
