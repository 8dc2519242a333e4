"""Error types raised while resolving nutrition data."""


class NutritionAdvisorError(Exception):
    """Base class for application errors."""


class InvalidInputError(NutritionAdvisorError):
    """Raised when a request carries neither an image nor a food name."""


class CollaboratorUnavailableError(NutritionAdvisorError):
    """Raised when an external AI collaborator is not configured."""


class CollaboratorFailureError(NutritionAdvisorError):
    """Raised when an external AI collaborator call fails or times out."""


class MalformedCollaboratorResponseError(NutritionAdvisorError):
    """Raised when a collaborator response does not match the expected shape."""
