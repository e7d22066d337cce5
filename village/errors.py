"""Game rule errors.

Engines raise these before touching any stored state, so a rejected action
never leaves a partial update behind. Each class carries the HTTP status the
API answers with; the app turns them into responses in one handler.
"""


class VillageError(RuntimeError):
    """Base class for every rejected game action."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(VillageError):
    """A request field is missing or invalid."""


class InsufficientEnergy(VillageError):
    """The villager is too tired for the requested activity."""


class InsufficientFunds(VillageError):
    """The Bells balance does not cover the price."""


class VillagerTooSick(VillageError):
    """The villager's health is too low for the requested activity."""


class AlreadyHealthy(VillageError):
    """Healing was requested for a villager that does not need it."""


class NoSpeciesAvailable(VillageError):
    """No bug or fish lives in the requested habitat."""


class NotFoundError(VillageError):
    """Villager, item or furniture is absent or not owned by the caller."""

    status_code = 404


class Unauthorized(VillageError):
    """Missing, unknown or expired token, or bad credentials."""

    status_code = 401


class Forbidden(VillageError):
    status_code = 403


class Conflict(VillageError):
    status_code = 409
