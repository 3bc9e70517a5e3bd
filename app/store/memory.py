import copy
import threading
from typing import Any, Dict, List, Optional

from app.store.base import R, Predicate, RecordNotFound, RecordStore


class InMemoryStore(RecordStore[R]):
    """Insertion-ordered list of records, guarded by one lock.

    Records go in and come out as deep copies, so nothing outside the
    store can mutate stored state without going through ``update``.
    """

    def __init__(self, key_field: str = "id"):
        super().__init__(key_field)
        self._records: List[R] = []
        self._lock = threading.Lock()

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if getattr(record, self.key_field) == record_id:
                return index
        raise RecordNotFound(record_id)

    def insert(self, record: R) -> R:
        with self._lock:
            self._records.append(record.model_copy(deep=True))
        return record

    def insert_if_absent(self, record: R, conflicts: Predicate) -> bool:
        with self._lock:
            if any(conflicts(existing) for existing in self._records):
                return False
            self._records.append(record.model_copy(deep=True))
            return True

    def list(self) -> List[R]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records]

    def find(self, predicate: Predicate) -> Optional[R]:
        with self._lock:
            for record in self._records:
                if predicate(record):
                    return record.model_copy(deep=True)
        return None

    def update(self, record_id: str, fields: Dict[str, Any]) -> R:
        with self._lock:
            record = self._records[self._index_of(record_id)]
            for name, value in fields.items():
                if value is not None:
                    setattr(record, name, copy.deepcopy(value))
            return record.model_copy(deep=True)

    def remove(self, record_id: str) -> None:
        with self._lock:
            del self._records[self._index_of(record_id)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
