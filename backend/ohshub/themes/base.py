"""Theme configuration types."""

from collections.abc import Callable
from dataclasses import dataclass

from ohshub.core.answers import AnswerSet
from ohshub.schemas.verdict import Verdict
from ohshub.schemas.wizard import Step

RiskEngine = Callable[[AnswerSet], Verdict]


@dataclass(frozen=True)
class WizardConfig:
    """Static configuration of one theme.

    ``assess_risk`` is None for themes that only inventory answers.
    """

    theme_id: str
    name: str
    description: str
    intro: str
    steps: tuple[Step, ...]
    assess_risk: RiskEngine | None = None

    @property
    def has_risk_assessment(self) -> bool:
        return self.assess_risk is not None
