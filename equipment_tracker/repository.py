"""
Design (repository.py)
- Purpose: Hold the in-memory record collection for one load/operate/save cycle behind a
           tiny API, so operations never poke at the raw list.
- Inputs: Records loaded from storage; names, statuses, ids and search terms.
- Outputs: Records, status pairs, id lists, and snapshots (copies) for saving.
- Side effects: Mutates the internal list only; persistence is the caller's job.
- Thread-safety: None needed; a Repo lives for exactly one operation.
"""

from typing import List, Optional, Tuple

from .models import Record, Status
from .utils import next_id, record_matches


class Repo:
    """
    Design (Repo)
    - State:
        _records: list of Record in insertion (file) order
    """

    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self._records: List[Record] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    # -------- Creation --------

    def add(self, name: str, status: Status) -> Record:
        """
        Purpose: Append a new record with the next free id.
        Inputs: name (str, already validated), status (Status)
        Outputs: The created Record.
        Side effects: Mutates _records.
        """
        record = Record(id=next_id(r.id for r in self._records), name=name, status=status)
        self._records.append(record)
        return record

    # -------- Lookup / status --------

    def get(self, record_id: int) -> Optional[Record]:
        """
        Purpose: Retrieve the first record with the given id.
        Outputs: Record or None
        """
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def set_status(self, record_id: int, status: Status) -> Optional[Tuple[Status, Status]]:
        """
        Purpose: Change a record's status.
        Inputs: record_id (int), status (Status)
        Outputs: (old_status, new_status), or None if the id is unknown.
        Side effects: Mutates the matching Record.
        """
        record = self.get(record_id)
        if record is None:
            return None
        previous = record.status
        record.status = status
        return previous, status

    # -------- Queries --------

    def search(self, term: str) -> List[int]:
        lowered = term.lower()
        return [r.id for r in self._records if record_matches(r, lowered)]

    def snapshot(self) -> List[Record]:
        """Return a copy of the record list (same order) for saving or display."""
        return list(self._records)
