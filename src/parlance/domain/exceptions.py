"""Domain exceptions."""


class ParlanceError(Exception):
    """Base exception for Parlance."""

    pass


class NotFound(ParlanceError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class ValidationError(ParlanceError):
    """Validation failed for input data.

    ``errors`` maps a field name (or ``"base"`` for errors that are not tied to
    a field) to the list of messages reported for it.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        summary = "; ".join(
            f"{field} {message}" for field, messages in self.errors.items() for message in messages
        )
        super().__init__(summary or "invalid")


class ImportInProgress(ValidationError):
    """Source content cannot change while a requested import is unfinished."""

    MESSAGE = "latest requested import is not yet finished"

    def __init__(self) -> None:
        super().__init__({"base": [self.MESSAGE]})


class NotReady(ParlanceError):
    """Document has active units that are not translated and approved in every required locale."""

    pass


class InvariantViolation(RuntimeError):
    """Internal inconsistency. Fatal; never reported to callers as a user error."""

    pass
