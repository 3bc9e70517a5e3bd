from dataclasses import dataclass

from fastapi import Request

from app.services.hotels import HotelHandler
from app.services.itinerary import ItineraryHandler
from app.services.restaurants import RestaurantHandler
from app.services.transport import TransportHandler
from app.services.users import UserHandler
from app.store.memory import InMemoryStore


@dataclass
class AppState:
    """Every handler and its store, built once per application."""

    users: UserHandler
    hotels: HotelHandler
    restaurants: RestaurantHandler
    transport: TransportHandler
    itinerary: ItineraryHandler


def create_state() -> AppState:
    return AppState(
        users=UserHandler(InMemoryStore()),
        hotels=HotelHandler(InMemoryStore()),
        restaurants=RestaurantHandler(InMemoryStore()),
        transport=TransportHandler(InMemoryStore()),
        itinerary=ItineraryHandler(InMemoryStore(key_field="trip_id")),
    )


def get_state(request: Request) -> AppState:
    return request.app.state.travel
