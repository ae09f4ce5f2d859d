"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Status, Record).
- Inputs: Field values (int, str, Status).
- Outputs: Enum members and dataclass instances; parse_status maps selector codes.
- Side effects: None.
- Thread-safety: Plain containers; each operation owns its own copies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .config import SELECTOR_LABELS
from .errors import Failure, invalid_status


class Status(str, Enum):
    """Operational state of a piece of equipment. Values are the on-disk names."""
    OPERATIONAL = "Operational"
    INOPERABLE = "Inoperable"
    NEEDS_MAINTENANCE = "NeedsMaintenance"
    UNKNOWN = "Unknown"
    MISSING = "Missing"
    DAMAGED = "Damaged"


_SELECTORS: Dict[str, Status] = {
    "O": Status.OPERATIONAL,
    "I": Status.INOPERABLE,
    "N": Status.NEEDS_MAINTENANCE,
    "U": Status.UNKNOWN,
    "M": Status.MISSING,
    "D": Status.DAMAGED,
}

_LABELS: Dict[Status, str] = {_SELECTORS[code]: label for code, label in SELECTOR_LABELS}


def parse_status(selector: Any) -> Union[Status, Failure]:
    """
    Purpose: Map a single-character selector (O/I/N/U/M/D) to a Status.
    Inputs: selector (str; case-insensitive, surrounding whitespace ignored)
    Outputs: Status, or Failure(InvalidStatus) for anything else.
    """
    if not isinstance(selector, str):
        return invalid_status(selector)
    status = _SELECTORS.get(selector.strip().upper())
    if status is None:
        return invalid_status(selector)
    return status


def status_label(status: Status) -> str:
    """Human label for menus/help ("Needs Maintenance" rather than "NeedsMaintenance")."""
    return _LABELS[status]


@dataclass
class Record:
    """
    Design (Record)
    - Purpose: One tracked equipment item.
    - Fields:
        id: positive integer, unique in the store, assigned at creation.
        name: non-empty display name, set at creation only.
        status: current Status; changed via update_status().
    """
    id: int
    name: str
    status: Status

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "status": self.status.value, "name": self.name}
