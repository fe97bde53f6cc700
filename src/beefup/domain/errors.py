"""Error taxonomy for the diet tracker."""


class BeefUpError(Exception):
    """Base class for all application errors."""


class ConfigurationError(BeefUpError):
    """Raised when the oracle credential is missing or invalid."""


class OracleError(BeefUpError):
    """Raised when an oracle call fails or returns unusable output."""


class MalformedResponseError(OracleError):
    """Raised when oracle output is not the expected JSON shape."""


class ResolutionError(BeefUpError):
    """Raised when a food description cannot be resolved."""


class PlanError(BeefUpError):
    """Raised when a diet plan cannot be generated."""


class SessionBusyError(BeefUpError):
    """Raised when an oracle call of the same kind is already in flight."""


class NotOnboardedError(BeefUpError):
    """Raised when the session has no plan yet."""
