from app.models.domain import Hotel
from app.services.base import ResourceHandler

HOTEL_FIELDS = ("name", "price_per_night", "rating", "address", "source")


class HotelHandler(ResourceHandler[Hotel]):
    resource = "hotels"
    record_model = Hotel
    created_id_key = "hotel_id"
    updated_key = "hotel"

    required_fields = HOTEL_FIELDS
    updatable_fields = HOTEL_FIELDS
    unique_fields = ("name", "address")

    created_message = "Hotel added successfully"
    conflict_message = "Hotel already exists"
    empty_message = "No hotels found"
    not_found_message = "Hotel not found"
    updated_message = "Hotel updated successfully"
    deleted_message = "Hotel deleted successfully"
