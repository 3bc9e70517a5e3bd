"""Storage interface used by the resource handlers.

Handlers only talk to ``RecordStore``; the in-memory list in
``app.store.memory`` is one implementation of it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)
Predicate = Callable[[R], bool]


class RecordNotFound(LookupError):
    """No record carries the requested identifier."""


class RecordStore(ABC, Generic[R]):
    def __init__(self, key_field: str = "id"):
        self.key_field = key_field

    @abstractmethod
    def insert(self, record: R) -> R: ...

    @abstractmethod
    def insert_if_absent(self, record: R, conflicts: Predicate) -> bool:
        """Store ``record`` unless an existing record satisfies ``conflicts``.

        The check and the insert happen as one step. Returns whether the
        record was stored.
        """

    @abstractmethod
    def list(self) -> List[R]: ...

    @abstractmethod
    def find(self, predicate: Predicate) -> Optional[R]: ...

    @abstractmethod
    def update(self, record_id: str, fields: Dict[str, Any]) -> R:
        """Overwrite every field whose value is not None.

        Raises RecordNotFound when no record has ``record_id``.
        """

    @abstractmethod
    def remove(self, record_id: str) -> None: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def get(self, record_id: str) -> Optional[R]:
        return self.find(lambda r: getattr(r, self.key_field) == record_id)
