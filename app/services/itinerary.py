import re
from typing import Any, Dict, Optional

from app.core.errors import ValidationError
from app.models.domain import Activity, DayPlan, Trip
from app.services.base import ResourceHandler, new_id

# Literal shape only: "2025-13-40" matches, calendar validity is not checked
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

SEED_ACTIVITY_PRICE = 100
SEED_ACTIVITY_LOCATION = "28.6139, 77.2090"


def is_date(value: Optional[str]) -> bool:
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def seed_itinerary(destination: str, start_date: str):
    """Placeholder first day: one sightseeing stop at the destination."""
    return [
        DayPlan(
            date=start_date,
            activities=[
                Activity(
                    type="sightseeing",
                    name=f"Explore {destination}",
                    details="Visit main attractions",
                    price=SEED_ACTIVITY_PRICE,
                    location=SEED_ACTIVITY_LOCATION,
                )
            ],
        )
    ]


class ItineraryHandler(ResourceHandler[Trip]):
    resource = "itinerary"
    record_model = Trip
    id_field = "trip_id"
    created_id_key = "trip_id"
    updated_key = "trip"

    updatable_fields = (
        "start_date",
        "end_date",
        "destination",
        "budget",
        "food_choice",
        "transport_mode",
        "itinerary",
    )

    missing_message = "Invalid location or date format"
    created_message = "Trip created successfully"
    empty_message = "No trips found"
    not_found_message = "Trip not found"
    updated_message = "Trip updated successfully"
    deleted_message = "Trip deleted successfully"

    def validate_create(self, data: Dict[str, Any]) -> None:
        if (
            not is_date(data.get("start_date"))
            or not is_date(data.get("end_date"))
            or not data.get("destination")
        ):
            self.logger.warning("Create rejected, invalid location or date format")
            raise ValidationError(self.missing_message)

    def validate_update(self, data: Dict[str, Any]) -> None:
        # Runs before any field is written
        if data.get("start_date") and not is_date(data["start_date"]):
            raise ValidationError("Invalid start date format")
        if data.get("end_date") and not is_date(data["end_date"]):
            raise ValidationError("Invalid end date format")

    def build_record(self, data: Dict[str, Any]) -> Trip:
        return Trip(
            trip_id=new_id(),
            start_date=data["start_date"],
            end_date=data["end_date"],
            destination=data["destination"],
            budget=data.get("budget"),
            food_choice=data.get("food_choice"),
            transport_mode=data.get("transport_mode"),
            itinerary=seed_itinerary(data["destination"], data["start_date"]),
        )

    def created_payload(self, record: Trip) -> Dict[str, Any]:
        payload = super().created_payload(record)
        payload["itinerary"] = [day.model_dump() for day in record.itinerary]
        return payload
