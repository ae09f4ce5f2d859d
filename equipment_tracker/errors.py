"""
Design (errors.py)
- Purpose: Typed failure values returned by the store and the record operations.
- Inputs: Error kind + human-readable message (+ optional detail).
- Outputs: Failure instances; callers branch with isinstance(result, Failure).
- Side effects: None.
- Thread-safety: Failure is frozen; safe to share.

Failures are returned, never raised, so every operation has a single return path
the front end can render.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    STORAGE_UNAVAILABLE = "StorageUnavailable"
    RECORD_NOT_FOUND = "RecordNotFound"
    INVALID_STATUS = "InvalidStatus"
    INVALID_INPUT = "InvalidInput"
    # Specialization of INVALID_INPUT for blank search terms
    EMPTY_SEARCH_TERM = "EmptySearchTerm"


@dataclass(frozen=True)
class Failure:
    """
    Design (Failure)
    - Fields:
        kind: ErrorKind describing what went wrong.
        message: text safe to show the operator.
        detail: optional extra context (path, id, raw input) for logs.
    """
    kind: ErrorKind
    message: str
    detail: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_invalid_input(self) -> bool:
        return self.kind in (ErrorKind.INVALID_INPUT, ErrorKind.EMPTY_SEARCH_TERM)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "error",
            "error_code": self.kind.value,
            "message": self.message,
            **self.detail,
        }


def storage_unavailable(message: str, **detail: Any) -> Failure:
    return Failure(ErrorKind.STORAGE_UNAVAILABLE, message, detail)


def record_not_found(record_id: int) -> Failure:
    return Failure(
        ErrorKind.RECORD_NOT_FOUND,
        f"No equipment found with ID {record_id}.",
        {"id": record_id},
    )


def invalid_status(selector: Any) -> Failure:
    return Failure(
        ErrorKind.INVALID_STATUS,
        f"Invalid status selection: {selector!r}.",
        {"selector": selector},
    )


def invalid_input(message: str, **detail: Any) -> Failure:
    return Failure(ErrorKind.INVALID_INPUT, message, detail)


def empty_search_term() -> Failure:
    return Failure(ErrorKind.EMPTY_SEARCH_TERM, "The search term cannot be empty.")
