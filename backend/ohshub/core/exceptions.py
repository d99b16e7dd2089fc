"""Domain exceptions raised by the wizard core."""


class WizardConfigurationError(Exception):
    """Raised when a wizard schema or theme configuration is invalid."""

    pass


class UnknownThemeError(WizardConfigurationError):
    """Raised when a theme id is not registered."""

    def __init__(self, theme_id: str):
        super().__init__(f"Unknown theme: {theme_id}")
        self.theme_id = theme_id


class RiskEngineUnavailableError(WizardConfigurationError):
    """Raised when an assessment is requested for a theme without rules."""

    def __init__(self, theme_id: str):
        super().__init__(f"Theme has no risk assessment: {theme_id}")
        self.theme_id = theme_id


class UnknownStepError(LookupError):
    """Raised when navigating to a step id the wizard does not define."""

    def __init__(self, step_id: str):
        super().__init__(f"Unknown step: {step_id}")
        self.step_id = step_id


class StepNotVisibleError(ValueError):
    """Raised when navigating to a step hidden by the current answers."""

    def __init__(self, step_id: str):
        super().__init__(f"Step is not visible: {step_id}")
        self.step_id = step_id


class InvalidAnswerError(ValueError):
    """Raised when an answer does not fit its question."""

    def __init__(self, question_id: str, message: str):
        super().__init__(f"{question_id}: {message}")
        self.question_id = question_id
