from app.api.routers.crud import crud_router
from app.models.domain import TripPayload

router = crud_router("itinerary", "Itinerary", TripPayload, noun="trip")
