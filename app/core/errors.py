from __future__ import annotations


class CatalogError(Exception):
    pass


class ValidationError(CatalogError):
    def __init__(self, field: str, message: str, *, errors: dict[str, list[str]] | None = None):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.errors = errors or {field: [message]}

    @classmethod
    def from_errors(cls, errors: dict[str, list[str]]) -> "ValidationError":
        field, messages = next(iter(errors.items()))
        return cls(field, messages[0], errors=errors)


class ForeignKeyError(ValidationError):
    """A reference to a row that does not exist."""

    def __init__(self, field: str, message: str = "does not exist"):
        super().__init__(field, message)


class TransactionAbortError(CatalogError):
    """A step of a multi-step write failed and the whole transaction was rolled back.

    ``step`` names the failing step, ``errors`` maps field names to messages and
    ``succeeded`` lists the steps that had completed before the failure. None of
    their effects were committed.
    """

    def __init__(self, step: str, errors: dict[str, list[str]], succeeded: tuple[str, ...] = ()):
        self.step = step
        self.errors = errors
        self.succeeded = tuple(succeeded)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{{name: {self.step}, error: {errors_to_string(self.errors)}}}"

    def as_detail(self) -> dict:
        return {
            "name": self.step,
            "errors": self.errors,
            "succeeded": list(self.succeeded),
            "message": self.message,
        }


class SearchConfigurationError(CatalogError):
    pass


def errors_to_string(errors: dict[str, list[str]]) -> str:
    return "; ".join(f"{field}: {', '.join(messages)}" for field, messages in errors.items())
