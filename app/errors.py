"""Analysis errors."""


class AnalysisError(Exception):
    """Base error for the forensics engine."""

    def __init__(self, message: str = "Analysis error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(AnalysisError):
    """Malformed or incomplete input."""

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class InsufficientDataError(AnalysisError):
    """Input too degenerate to produce a meaningful statistic."""

    def __init__(self, message: str = "Insufficient data"):
        super().__init__(message)
