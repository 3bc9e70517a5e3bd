from app.api.routers.crud import crud_router
from app.models.domain import HotelPayload

router = crud_router("hotels", "Hotels", HotelPayload, noun="hotel")
