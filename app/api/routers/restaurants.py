from app.api.routers.crud import crud_router
from app.models.domain import RestaurantPayload

router = crud_router("restaurants", "Restaurants", RestaurantPayload, noun="restaurant")
