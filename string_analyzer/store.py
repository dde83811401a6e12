"""
In-memory string collection mirrored to a flat JSON file.

The whole collection lives in a list in insertion order.  It is read
once by ``load`` when the application is built and written back in
full by ``save`` after every create or delete; there is no incremental
update.  Mutations happen synchronously in memory and the caller
persists afterwards, so a concurrent reader sees the new state before
the file write has finished.  Nothing guards two concurrent creates
against both passing the duplicate check.
"""

import json
import logging
import os
from typing import Iterator, List, Optional

from fastapi import Request
from pydantic import ValidationError

from .schemas import StringRecord

logger = logging.getLogger(__name__)


class StringStore:
    def __init__(self, path: str):
        self.path = path
        self.records: List[StringRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[StringRecord]:
        return iter(self.records)

    def load(self) -> None:
        """Read the collection from disk.

        A missing file starts an empty collection.  Any other failure is
        logged and also leaves the collection empty; startup never aborts.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array at the top level")
            self.records = [StringRecord.model_validate(item) for item in raw]
        except FileNotFoundError:
            logger.info("No database file found at %s, starting with an empty one.", self.path)
            self.records = []
        except (OSError, ValueError, ValidationError) as e:
            logger.error("Failed to load string database from %s: %s", self.path, e)
            self.records = []
        else:
            logger.info("String database loaded successfully (%d records).", len(self.records))

    def save(self) -> None:
        """Rewrite the whole collection.  I/O errors propagate."""
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        payload = json.dumps(
            [r.model_dump() for r in self.records], indent=2, ensure_ascii=False
        )
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp, self.path)

    def index_of(self, value: str) -> int:
        for i, record in enumerate(self.records):
            if record.value == value:
                return i
        return -1

    def find(self, value: str) -> Optional[StringRecord]:
        i = self.index_of(value)
        return self.records[i] if i >= 0 else None

    def exists(self, value: str) -> bool:
        return self.index_of(value) >= 0

    def add(self, record: StringRecord) -> None:
        self.records.append(record)

    def remove_at(self, index: int) -> StringRecord:
        return self.records.pop(index)

    def snapshot(self) -> List[StringRecord]:
        return list(self.records)


def get_store(request: Request) -> StringStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
