"""Error types surfaced to callers of the pipeline."""

from typing import Any

from pydantic import BaseModel


class FieldError(BaseModel):
    """A single schema violation, located by dotted path (``contact.name``)."""
    path: str
    message: str
    kind: str = "value_error"


class InputValidationError(ValueError):
    """Raised when structured input fails schema validation.

    Raised before any normalization runs, so callers never see a
    partially normalized value.
    """

    def __init__(self, subject: str, errors: list[FieldError]):
        self.subject = subject
        self.errors = errors
        paths = ", ".join(e.path or "<root>" for e in errors)
        super().__init__(f"Invalid {subject}: {paths}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": f"Invalid {self.subject}.",
            "details": [e.model_dump() for e in self.errors],
        }
