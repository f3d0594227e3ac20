"""Error types raised by the eco tracker."""


class EcoTrackerError(Exception):
    """Base class for eco tracker errors."""


class InvalidInputError(EcoTrackerError):
    """Raised when an activity quantity or record field fails validation."""

    def __init__(
        self,
        name: str,
        value: object,
        reason: str = "must be a non-negative finite number",
    ) -> None:
        super().__init__(f"Invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value


class ChallengeNotFoundError(EcoTrackerError):
    """Raised when a challenge id is not in the catalog."""

    def __init__(self, challenge_id: object) -> None:
        super().__init__(f"Challenge not found: {challenge_id}")
        self.challenge_id = challenge_id


class PersistenceError(EcoTrackerError):
    """Raised when the durable store cannot be read or written."""
