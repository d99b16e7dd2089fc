"""Wizard service for theme lookup, navigation, assessment and summaries."""

import logging

from fastapi import HTTPException, status

from ohshub.core.answers import AnswerSet
from ohshub.core.config import Settings
from ohshub.core.exceptions import (
    InvalidAnswerError,
    RiskEngineUnavailableError,
    StepNotVisibleError,
    UnknownStepError,
    UnknownThemeError,
)
from ohshub.core.metrics import observe_assessment
from ohshub.core.navigation import WizardNavigator
from ohshub.core.report import generate_report_text
from ohshub.core.structured_logging import log_json
from ohshub.schemas.theme import (
    NavigationRequest,
    NavigationResponse,
    SummaryRequest,
    SummaryResponse,
    ThemeDetail,
    ThemeSummary,
)
from ohshub.schemas.verdict import Verdict
from ohshub.themes import assess_theme, get_wizard_config, list_wizard_configs
from ohshub.themes.base import WizardConfig

logger = logging.getLogger(__name__)


class WizardService:
    """Service for stateless wizard operations.

    The client holds the answers and the wizard position; every call
    rebuilds the session from the request.
    """

    def __init__(self, settings: Settings):
        """Initialize wizard service.

        Args:
            settings: Application settings
        """
        self.settings = settings

    def get_config(self, theme_id: str) -> WizardConfig:
        """Get a theme configuration.

        Raises:
            HTTPException: 404 if the theme does not exist
        """
        try:
            return get_wizard_config(theme_id)
        except UnknownThemeError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Theme not found",
            ) from e

    def list_themes(self) -> list[ThemeSummary]:
        return [
            ThemeSummary(
                id=config.theme_id,
                name=config.name,
                description=config.description,
                has_risk_assessment=config.has_risk_assessment,
            )
            for config in list_wizard_configs()
        ]

    def get_theme(self, theme_id: str) -> ThemeDetail:
        config = self.get_config(theme_id)
        return ThemeDetail(
            id=config.theme_id,
            name=config.name,
            description=config.description,
            has_risk_assessment=config.has_risk_assessment,
            intro=config.intro,
            steps=list(config.steps),
        )

    def navigate(self, theme_id: str, request: NavigationRequest) -> NavigationResponse:
        """Apply answer updates and one navigation action.

        Args:
            theme_id: Theme slug
            request: Client-held state and the action to apply

        Returns:
            New position and the derived step/question lists

        Raises:
            HTTPException: 404 for an unknown theme or target step, 409 when
                the target step is hidden, 422 for an invalid answer update
        """
        config = self.get_config(theme_id)
        navigator = WizardNavigator(config.steps)
        navigator.load_state(
            {
                "current_step": request.current_step,
                "at_review": request.at_review,
                "answers": request.answers,
            }
        )

        try:
            for question_id, value in request.updates.items():
                navigator.answer(question_id, value)
            moved = self._apply_action(navigator, request)
        except InvalidAnswerError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            ) from e
        except UnknownStepError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e),
            ) from e
        except StepNotVisibleError as e:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=str(e),
            ) from e

        state = navigator.export_state()
        return NavigationResponse(
            current_step=navigator.current_step_id,
            at_review=navigator.at_review,
            moved=moved,
            visible_steps=navigator.visible_step_ids(),
            visible_questions=[q.id for q in navigator.visible_questions()],
            missing_required=navigator.missing_required(),
            progress=navigator.progress,
            answers=state["answers"],
        )

    @staticmethod
    def _apply_action(navigator: WizardNavigator, request: NavigationRequest) -> bool:
        before = (navigator.current_step_id, navigator.at_review)

        if request.action == "next":
            return navigator.next(require_complete=request.require_complete)
        if request.action == "previous":
            return navigator.previous()
        if request.action == "goto":
            if not request.target_step:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="target_step is required for goto",
                )
            navigator.go_to(request.target_step)
        elif request.action == "reset":
            navigator.reset()
        else:
            navigator.start()

        return (navigator.current_step_id, navigator.at_review) != before

    def assess(self, theme_id: str, answers: AnswerSet) -> Verdict:
        """Run the theme's risk engine.

        Raises:
            HTTPException: 404 for an unknown theme, 409 when the theme has
                no risk assessment
        """
        try:
            verdict = assess_theme(theme_id, answers)
        except UnknownThemeError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Theme not found",
            ) from e
        except RiskEngineUnavailableError as e:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Theme has no risk assessment",
            ) from e

        observe_assessment(theme_id=theme_id, overall_level=verdict.overall_level)
        log_json(
            logger,
            logging.INFO,
            "risk_assessment",
            theme=theme_id,
            overall_level=verdict.overall_level.value,
            findings=len(verdict.findings),
            recommendations=len(verdict.recommendations),
            data_gaps=len(verdict.data_gaps),
        )
        return verdict

    def summarize(self, theme_id: str, request: SummaryRequest) -> SummaryResponse:
        """Render the plain-text summary.

        The assessment block is included when requested and the theme has
        a risk engine.
        """
        config = self.get_config(theme_id)
        verdict = None
        if request.include_assessment and config.has_risk_assessment:
            verdict = self.assess(theme_id, request.answers)

        text = generate_report_text(
            config.steps,
            request.answers,
            config.name,
            verdict=verdict,
            product_name=self.settings.report_product_name,
        )
        return SummaryResponse(text=text)
