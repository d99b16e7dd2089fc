"""FastAPI dependencies."""

from fastapi import Depends

from ohshub.core.config import Settings, get_settings
from ohshub.services.wizard_service import WizardService


def get_wizard_service(settings: Settings = Depends(get_settings)) -> WizardService:
    """Wizard service bound to the current settings."""
    return WizardService(settings)
