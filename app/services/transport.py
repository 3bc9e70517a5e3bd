from typing import Any, Dict

from app.core.errors import ValidationError
from app.models.domain import TRANSPORT_TYPES, TransportOption
from app.services.base import ResourceHandler

TRANSPORT_FIELDS = ("type", "name", "price", "availability")


class TransportHandler(ResourceHandler[TransportOption]):
    """Transport options.

    Unlike the other resources, ``price`` and ``availability`` count as
    supplied whenever they are not null, so a price of 0 or an
    availability of false is stored on create and applied on update.
    """

    resource = "transport"
    record_model = TransportOption
    created_id_key = "transport_id"
    updated_key = "option"

    required_fields = TRANSPORT_FIELDS
    updatable_fields = TRANSPORT_FIELDS
    unique_fields = ("name", "type")
    defined_fields = frozenset({"price", "availability"})

    created_message = "Transport option added successfully"
    conflict_message = "Transport option already exists"
    empty_message = "No transport options available"
    not_found_message = "Transport option not found"
    updated_message = "Transport option updated successfully"
    deleted_message = "Transport option deleted successfully"

    def validate_create(self, data: Dict[str, Any]) -> None:
        if data.get("type") not in TRANSPORT_TYPES:
            self.logger.warning(f"Create rejected, invalid type {data.get('type')!r}")
            raise ValidationError("Invalid transport type")
        super().validate_create(data)

    def supplied_fields(self, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super().supplied_fields(data)
        # An unknown type on update is dropped, the rest still applies
        if fields.get("type") not in (None, *TRANSPORT_TYPES):
            del fields["type"]
        return fields
