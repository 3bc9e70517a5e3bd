from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, confloat

# JSON integers stay int, decimals stay float. No coercion from strings or
# booleans, and no NaN/Infinity (those cannot be serialized back out).
Number = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]

TRANSPORT_TYPES = ("taxi", "rental", "public")
TransportType = Literal["taxi", "rental", "public"]


# --- Stored records ---


class User(BaseModel):
    id: str
    username: str
    email: str
    password_hash: str


class Hotel(BaseModel):
    id: str
    name: str
    price_per_night: Number
    rating: Number
    address: str
    source: str


class Restaurant(BaseModel):
    id: str
    name: str
    rating: Number
    price_range: str
    address: str
    source: str


class TransportOption(BaseModel):
    id: str
    type: TransportType
    name: str
    price: Number
    availability: bool


class Activity(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    name: Optional[str] = None
    details: Optional[str] = None
    price: Optional[Number] = None
    location: Optional[str] = None


class DayPlan(BaseModel):
    model_config = ConfigDict(extra="allow")

    date: Optional[str] = None
    activities: List[Activity] = Field(default_factory=list)


class Trip(BaseModel):
    trip_id: str
    start_date: str
    end_date: str
    destination: str
    budget: Optional[Number] = None
    food_choice: Optional[str] = None
    transport_mode: Optional[str] = None
    itinerary: List[DayPlan] = Field(default_factory=list)


# --- Request bodies ---
# Every field is optional so that presence rules are enforced by the
# handlers (and reported as {"error": ...}) rather than by schema errors.


class UserPayload(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginPayload(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class HotelPayload(BaseModel):
    name: Optional[str] = None
    price_per_night: Optional[Number] = None
    rating: Optional[Number] = None
    address: Optional[str] = None
    source: Optional[str] = None


class RestaurantPayload(BaseModel):
    name: Optional[str] = None
    rating: Optional[Number] = None
    price_range: Optional[str] = None
    address: Optional[str] = None
    source: Optional[str] = None


class TransportPayload(BaseModel):
    # Free-form here, checked against TRANSPORT_TYPES by the handler
    type: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Number] = None
    availability: Optional[StrictBool] = None


class TripPayload(BaseModel):
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    destination: Optional[str] = None
    budget: Optional[Number] = None
    food_choice: Optional[str] = None
    transport_mode: Optional[str] = None
    itinerary: Optional[List[DayPlan]] = None
