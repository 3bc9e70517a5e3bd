from app.api.routers.crud import crud_router
from app.models.domain import TransportPayload

router = crud_router("transport", "Transport", TransportPayload, noun="transport option")
