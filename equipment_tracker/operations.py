"""
Design (operations.py)
- Purpose: The four record operations (create, update status, get status, search) plus a
           read-only listing, each running one full load -> work -> save cycle.
- Inputs: A RecordStore and already-parsed primitives from the front end.
- Outputs: The operation's value, or a Failure describing why it could not run.
- Side effects: create_record/update_status rewrite the backing file; the rest only read.
- Thread-safety: Not locked; callers run one operation at a time.
"""

import logging
from typing import List, Tuple, Union

from .errors import Failure, empty_search_term, invalid_input, record_not_found
from .models import Record, Status, parse_status
from .repository import Repo
from .storage import RecordStore

logger = logging.getLogger(__name__)


def _coerce_status(value: Union[Status, str]) -> Union[Status, Failure]:
    if isinstance(value, Status):
        return value
    return parse_status(value)


def _open_repo(store: RecordStore) -> Union[Repo, Failure]:
    records = store.load()
    if isinstance(records, Failure):
        return records
    return Repo(records)


def create_record(store: RecordStore, name: str, status: Union[Status, str]) -> Union[Record, Failure]:
    """
    Purpose: Register a new piece of equipment.
    Inputs: store, name (non-blank), status (Status or selector code O/I/N/U/M/D)
    Outputs: The new Record with its assigned id, or Failure
             (InvalidInput, InvalidStatus, StorageUnavailable).
    Side effects: Rewrites the backing file. A missing file is a failure; it is
                  never created here (see RecordStore.initialize).
    """
    if not isinstance(name, str) or not name.strip():
        logger.warning("Rejected equipment with blank name", extra={"error_code": "InvalidInput"})
        return invalid_input("The name of the equipment cannot be empty.")
    resolved = _coerce_status(status)
    if isinstance(resolved, Failure):
        logger.warning("Rejected status selector %r", status, extra={"error_code": resolved.kind.value})
        return resolved

    repo = _open_repo(store)
    if isinstance(repo, Failure):
        return repo
    record = repo.add(name.strip(), resolved)
    failure = store.save(repo.snapshot())
    if failure is not None:
        return failure
    logger.info("Created equipment %d (%s) as %s", record.id, record.name, record.status.value,
                extra={"record_id": record.id})
    return record


def update_status(
    store: RecordStore, record_id: int, status: Union[Status, str]
) -> Union[Tuple[Status, Status], Failure]:
    """
    Purpose: Change the status of an existing record.
    Outputs: (old_status, new_status), or Failure, checked in the order
             StorageUnavailable, RecordNotFound, InvalidStatus.
    Side effects: Rewrites the backing file on success.
    """
    repo = _open_repo(store)
    if isinstance(repo, Failure):
        return repo
    if repo.get(record_id) is None:
        logger.warning("Status update for unknown id %d", record_id, extra={"record_id": record_id})
        return record_not_found(record_id)
    resolved = _coerce_status(status)
    if isinstance(resolved, Failure):
        logger.warning("Rejected status selector %r", status, extra={"error_code": resolved.kind.value})
        return resolved

    change = repo.set_status(record_id, resolved)
    failure = store.save(repo.snapshot())
    if failure is not None:
        return failure
    logger.info("Equipment %d: %s -> %s", record_id, change[0].value, change[1].value,
                extra={"record_id": record_id})
    return change


def get_status(store: RecordStore, record_id: int) -> Union[Status, Failure]:
    """Current status of one record. Read-only."""
    repo = _open_repo(store)
    if isinstance(repo, Failure):
        return repo
    record = repo.get(record_id)
    if record is None:
        return record_not_found(record_id)
    return record.status


def search_by_term(store: RecordStore, term: str) -> Union[List[int], Failure]:
    """
    Purpose: Find ids of records whose name or status matches `term`.
    Inputs: store, term (must not be blank)
    Outputs: Matching ids in file order ([] if none), or Failure
             (StorageUnavailable, EmptySearchTerm).
    Side effects: None.

    Matching is case-insensitive and only looks inside the first five characters of
    the name/status name, or at a full-string equality (see utils.window_match).
    """
    repo = _open_repo(store)
    if isinstance(repo, Failure):
        return repo
    if not isinstance(term, str) or not term.strip():
        return empty_search_term()
    ids = repo.search(term)
    logger.debug("Search %r matched %d of %d records", term, len(ids), len(repo))
    return ids


def list_records(store: RecordStore) -> Union[List[Record], Failure]:
    """All records in file order. Read-only."""
    repo = _open_repo(store)
    if isinstance(repo, Failure):
        return repo
    return repo.snapshot()
