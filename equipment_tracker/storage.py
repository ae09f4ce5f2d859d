"""
Design (storage.py)
- Purpose: Load and save the equipment list to/from disk (JSON).
- Inputs: Path (injected; get_records_path() gives the default), list of Record for save.
- Outputs: list[Record] or Failure on load; None or Failure on save.
- Side effects: Reads/writes the backing file. A missing or unreadable file is a
  StorageUnavailable failure, never an empty list. Empty file or null -> empty list.
- Thread-safety: Not locked; one process, one operation at a time (last writer wins).

Statuses must be stored by name (any case). Numeric status codes are rejected on load:
the file is read strictly rather than guessing an enum order.
"""

import contextlib
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import DATA_DIRNAME, JSON_INDENT, RECORDS_FILENAME, RECORDS_FILE_ENV
from .errors import Failure, storage_unavailable
from .models import Record, Status

logger = logging.getLogger(__name__)

_STATUS_BY_NAME: Dict[str, Status] = {s.value.lower(): s for s in Status}


def get_records_path() -> Path:
    """
    Resolve path for equipment.json. Environment override wins; otherwise the data
    dir under the project root.
    """
    override = os.environ.get(RECORDS_FILE_ENV)
    if override:
        return Path(override).expanduser()
    base = Path(__file__).resolve().parent.parent
    return base / DATA_DIRNAME / RECORDS_FILENAME


def _record_from_dict(item: Any) -> Record:
    if not isinstance(item, dict):
        raise TypeError(f"expected an object, got {type(item).__name__}")
    record_id = item["id"]
    if isinstance(record_id, bool) or not isinstance(record_id, int) or record_id < 1:
        raise ValueError(f"invalid id {record_id!r}")
    name = item["name"]
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"invalid name for id {record_id}")
    raw_status = item["status"]
    if not isinstance(raw_status, str) or raw_status.lower() not in _STATUS_BY_NAME:
        raise ValueError(f"invalid status {raw_status!r} for id {record_id}")
    return Record(id=record_id, name=name, status=_STATUS_BY_NAME[raw_status.lower()])


class RecordStore:
    """
    Design (RecordStore)
    - State:
        path: backing JSON file (one top-level array of {id, status, name}).
    - Every call re-reads or fully rewrites the file; nothing is cached.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"RecordStore({str(self.path)!r})"

    @property
    def _log_extra(self) -> Dict[str, Any]:
        return {"path": str(self.path), "error_code": "StorageUnavailable"}

    def load(self) -> Union[List[Record], Failure]:
        records: List[Record] = []
        if not self.path.exists():
            logger.warning("Backing file %s does not exist", self.path, extra=self._log_extra)
            return storage_unavailable(
                "The equipment file does not exist or is not accessible.",
                path=str(self.path),
            )
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            logger.warning("Could not read %s: %s", self.path, exc, extra=self._log_extra)
            return storage_unavailable(
                "The equipment file could not be read.", path=str(self.path)
            )

        if not text.strip():
            logger.debug("Backing file %s is empty", self.path)
            return records
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Backing file %s is not valid JSON: %s", self.path, exc, extra=self._log_extra)
            return storage_unavailable(
                "The equipment file is not valid JSON.", path=str(self.path)
            )
        if data is None:
            return records
        if not isinstance(data, list):
            return storage_unavailable(
                "The equipment file must hold a list of records.", path=str(self.path)
            )

        seen = set()
        for index, item in enumerate(data):
            try:
                record = _record_from_dict(item)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Malformed entry %d in %s: %s", index, self.path, exc, extra=self._log_extra)
                return storage_unavailable(
                    f"The equipment file has a malformed entry at position {index}.",
                    path=str(self.path),
                )
            if record.id in seen:
                return storage_unavailable(
                    f"The equipment file contains duplicate ID {record.id}.",
                    path=str(self.path),
                )
            seen.add(record.id)
            records.append(record)
        logger.debug("Loaded %d records from %s", len(records), self.path)
        return records

    def save(self, records: List[Record]) -> Optional[Failure]:
        """
        Serialize the whole list and replace the backing file. The new content is
        written to a temp file in the same directory first, then renamed over it.
        """
        payload = json.dumps([r.to_dict() for r in records], indent=JSON_INDENT, ensure_ascii=False) + "\n"
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc, extra=self._log_extra)
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            return storage_unavailable(
                "The equipment file could not be written.", path=str(self.path)
            )
        logger.debug("Saved %d records to %s", len(records), self.path)
        return None

    def initialize(self) -> Optional[Failure]:
        """Create the backing file with an empty list. Existing files are left alone."""
        if self.path.exists():
            logger.debug("Backing file %s already exists", self.path)
            return None
        logger.info("Creating empty equipment file at %s", self.path)
        return self.save([])
