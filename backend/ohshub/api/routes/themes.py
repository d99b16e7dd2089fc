"""API routes for theme wizards."""

from fastapi import APIRouter, Depends

from ohshub.api.deps import get_wizard_service
from ohshub.schemas.theme import (
    AssessmentRequest,
    NavigationRequest,
    NavigationResponse,
    SummaryRequest,
    SummaryResponse,
    ThemeDetail,
    ThemeSummary,
)
from ohshub.schemas.verdict import Verdict
from ohshub.services.wizard_service import WizardService

router = APIRouter()


@router.get(
    "",
    response_model=list[ThemeSummary],
    summary="List themes",
)
async def list_themes(
    service: WizardService = Depends(get_wizard_service),
) -> list[ThemeSummary]:
    return service.list_themes()


@router.get(
    "/{theme_id}",
    response_model=ThemeDetail,
    summary="Get theme with wizard schema",
)
async def get_theme(
    theme_id: str,
    service: WizardService = Depends(get_wizard_service),
) -> ThemeDetail:
    """Get theme metadata and its steps, including visibility conditions."""
    return service.get_theme(theme_id)


@router.post(
    "/{theme_id}/navigation",
    response_model=NavigationResponse,
    summary="Move through the wizard",
)
async def navigate(
    theme_id: str,
    request: NavigationRequest,
    service: WizardService = Depends(get_wizard_service),
) -> NavigationResponse:
    """Apply answer updates and a navigation action to client-held state.

    Visibility is recomputed from the submitted answers, so a step hidden by
    an answer change is skipped or clamped in the returned position.
    """
    return service.navigate(theme_id, request)


@router.post(
    "/{theme_id}/assessment",
    response_model=Verdict,
    summary="Assess risk",
)
async def assess(
    theme_id: str,
    request: AssessmentRequest,
    service: WizardService = Depends(get_wizard_service),
) -> Verdict:
    """Run the theme's risk engine on the submitted answers.

    Themes without an engine answer 409.
    """
    return service.assess(theme_id, request.answers)


@router.post(
    "/{theme_id}/summary",
    response_model=SummaryResponse,
    summary="Plain-text summary",
)
async def summarize(
    theme_id: str,
    request: SummaryRequest,
    service: WizardService = Depends(get_wizard_service),
) -> SummaryResponse:
    return service.summarize(theme_id, request)
