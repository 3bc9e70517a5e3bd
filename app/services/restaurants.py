from app.models.domain import Restaurant
from app.services.base import ResourceHandler

RESTAURANT_FIELDS = ("name", "rating", "price_range", "address", "source")


class RestaurantHandler(ResourceHandler[Restaurant]):
    resource = "restaurants"
    record_model = Restaurant
    created_id_key = "restaurant_id"
    updated_key = "restaurant"

    required_fields = RESTAURANT_FIELDS
    updatable_fields = RESTAURANT_FIELDS
    unique_fields = ("name", "address")

    created_message = "Restaurant added successfully"
    conflict_message = "Restaurant already exists"
    empty_message = "No restaurants found"
    not_found_message = "Restaurant not found"
    updated_message = "Restaurant updated successfully"
    deleted_message = "Restaurant deleted successfully"
