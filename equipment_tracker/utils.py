"""
Design (utils.py)
- Purpose: Reusable helpers for search matching and id assignment.
- Inputs: Records, search terms, id collections.
- Outputs: Helper results (bools, ints).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from typing import Iterable

from .config import SEARCH_WINDOW
from .models import Record


def window_match(text: str, term: str, window: int = SEARCH_WINDOW) -> bool:
    """
    Purpose: Match `term` against `text` the way search has always done it.
    Inputs: text (name or status name), term (already lower-cased).
    Outputs: True if text is at least `window` long and its first `window`
             characters contain term, or if the whole text equals term.
    Side Effects: None.

    Only the leading window is searched, so "mmer" does not find "Hammer" while
    "hamm" does. Terms longer than the window can only hit by full equality.
    """
    lowered = text.lower()
    if len(text) >= window and term in lowered[:window]:
        return True
    return lowered == term


def record_matches(record: Record, term: str) -> bool:
    """True if the record's name or status name matches the lower-cased term."""
    return window_match(record.name, term) or window_match(record.status.value, term)


def next_id(ids: Iterable[int]) -> int:
    """Highest existing id + 1, or 1 when there are none."""
    return max(ids, default=0) + 1
