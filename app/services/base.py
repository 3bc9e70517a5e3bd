"""Create/read/update/delete over a RecordStore, shared by every resource.

Each resource subclasses ``ResourceHandler`` and fills in its field sets,
uniqueness key and messages. Subclasses hook in through
``validate_create``, ``validate_update`` and ``build_record``.
"""

import logging
import uuid
from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Tuple, Type

from pydantic import BaseModel

from app.core.errors import Conflict, NotFound, ValidationError
from app.store.base import R, RecordNotFound, RecordStore

logger = logging.getLogger("travel_companion_server.handlers")


def new_id() -> str:
    return str(uuid.uuid4())


def is_blank(value: Any) -> bool:
    """None, False, 0 and "" count as not supplied. Empty lists still count."""
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


class ResourceHandler(Generic[R]):
    # Path segment under /api, also names the logger
    resource: ClassVar[str]
    record_model: ClassVar[Type[BaseModel]]
    id_field: ClassVar[str] = "id"
    # Key of the new identifier in the create response, e.g. "hotel_id"
    created_id_key: ClassVar[str]
    # Key of the record in the update response, e.g. "hotel"
    updated_key: ClassVar[str]

    required_fields: ClassVar[Tuple[str, ...]] = ()
    unique_fields: ClassVar[Tuple[str, ...]] = ()
    updatable_fields: ClassVar[Tuple[str, ...]] = ()
    # Fields tested with "is not None" instead of truthiness, so 0/False count
    defined_fields: ClassVar[FrozenSet[str]] = frozenset()
    empty_list_is_error: ClassVar[bool] = True

    missing_message: ClassVar[str] = "All fields are required"
    created_message: ClassVar[str]
    conflict_message: ClassVar[str]
    empty_message: ClassVar[str]
    not_found_message: ClassVar[str]
    updated_message: ClassVar[str]
    deleted_message: ClassVar[str]

    def __init__(self, store: RecordStore):
        self.store = store
        self.logger = logger.getChild(self.resource)

    # --- presence rules ---

    def is_supplied(self, field: str, value: Any) -> bool:
        if field in self.defined_fields:
            return value is not None
        return not is_blank(value)

    def missing_fields(self, data: Dict[str, Any]) -> List[str]:
        return [f for f in self.required_fields if not self.is_supplied(f, data.get(f))]

    def supplied_fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Fields of a partial update that will actually be written."""
        return {
            f: data[f]
            for f in self.updatable_fields
            if f in data and self.is_supplied(f, data[f])
        }

    # --- hooks ---

    def validate_create(self, data: Dict[str, Any]) -> None:
        missing = self.missing_fields(data)
        if missing:
            self.logger.warning(f"Create rejected, missing fields: {missing}")
            raise ValidationError(self.missing_message)

    def validate_update(self, data: Dict[str, Any]) -> None:
        pass

    def build_record(self, data: Dict[str, Any]) -> BaseModel:
        fields = {f: data.get(f) for f in self.record_model.model_fields if f in data}
        return self.record_model(**{self.id_field: new_id()}, **fields)

    def created_payload(self, record: BaseModel) -> Dict[str, Any]:
        return {
            "message": self.created_message,
            self.created_id_key: getattr(record, self.id_field),
        }

    def serialize(self, record: BaseModel) -> Dict[str, Any]:
        return record.model_dump()

    # --- operations ---

    def conflicts_with(self, data: Dict[str, Any]):
        def predicate(existing: BaseModel) -> bool:
            return all(getattr(existing, f) == data.get(f) for f in self.unique_fields)

        return predicate

    def store_new(self, record: BaseModel, data: Dict[str, Any]) -> None:
        if not self.unique_fields:
            self.store.insert(record)
            return
        if not self.store.insert_if_absent(record, self.conflicts_with(data)):
            self.logger.warning(
                f"Create rejected, duplicate {self.unique_fields}"
            )
            raise Conflict(self.conflict_message)

    def create(self, payload: BaseModel) -> Dict[str, Any]:
        data = payload.model_dump()
        self.validate_create(data)
        record = self.build_record(data)
        self.store_new(record, data)
        self.logger.info(f"Created {getattr(record, self.id_field)}")
        return self.created_payload(record)

    def list_all(self) -> List[Dict[str, Any]]:
        records = self.store.list()
        if not records and self.empty_list_is_error:
            raise NotFound(self.empty_message)
        return [self.serialize(r) for r in records]

    def _get_record(self, record_id: str) -> BaseModel:
        record = self.store.get(record_id)
        if record is None:
            raise NotFound(self.not_found_message)
        return record

    def get(self, record_id: str) -> Dict[str, Any]:
        return self.serialize(self._get_record(record_id))

    def apply_update(self, record_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        try:
            record = self.store.update(record_id, fields)
        except RecordNotFound:
            raise NotFound(self.not_found_message) from None
        self.logger.info(f"Updated {record_id}: {sorted(fields)}")
        return {"message": self.updated_message, self.updated_key: self.serialize(record)}

    def update(self, record_id: str, payload: BaseModel) -> Dict[str, Any]:
        # Only keys the caller actually sent
        data = {f: getattr(payload, f) for f in payload.model_fields_set}
        self._get_record(record_id)
        self.validate_update(data)
        return self.apply_update(record_id, self.supplied_fields(data))

    def delete(self, record_id: str) -> Dict[str, Any]:
        try:
            self.store.remove(record_id)
        except RecordNotFound:
            raise NotFound(self.not_found_message) from None
        self.logger.info(f"Deleted {record_id}")
        return {"message": self.deleted_message}
