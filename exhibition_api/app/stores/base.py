"""
Shared implementation for the in‑memory record stores.

A store keeps its records in a list to preserve insertion order and
maintains an index from id to the first record inserted with that id.
Lookups go through the index, so a record added later with an id that
is already taken is still listed by ``get_all`` but is never returned
by ``get_by_id``.
"""

import logging
from typing import Dict, Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")

logger = logging.getLogger(__name__)


class RecordStore(Generic[RecordT]):
    """Ordered collection of records keyed by their ``id`` attribute."""

    # Human readable record name used in log messages.
    kind = "record"

    def __init__(self) -> None:
        self._records: List[RecordT] = []
        self._index: Dict[int, RecordT] = {}

    def add(self, record: RecordT) -> None:
        """Append ``record`` to the store.

        No uniqueness check is performed.  If a record with the same id
        already exists the new one is stored but shadowed: lookups keep
        returning the first.
        """
        record_id = record.id  # type: ignore[attr-defined]
        self._records.append(record)
        if record_id in self._index:
            logger.warning(
                "Duplicate %s id %s; the first %s keeps precedence",
                self.kind,
                record_id,
                self.kind,
            )
            return
        self._index[record_id] = record

    def get_all(self) -> List[RecordT]:
        """Return all records in the order they were added."""
        return list(self._records)

    def get_by_id(self, record_id: int) -> Optional[RecordT]:
        """Return the first record added with ``record_id`` or ``None``."""
        return self._index.get(record_id)
