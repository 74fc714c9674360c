from datetime import date
from decimal import Decimal
from pydantic import BaseModel
from typing import List, Optional, Union

class FilterOptions(BaseModel):
    """Optional listing search constraints. Values are passed through unvalidated;
    strings that don't parse end up as NaN parameters for the database to reject.
    """
    city: Optional[str] = None
    owner_id: Optional[Union[int, float, str]] = None
    minimum_price_per_night: Optional[Union[Decimal, str]] = None
    maximum_price_per_night: Optional[Union[Decimal, str]] = None
    minimum_rating: Optional[Union[Decimal, str]] = None

class NewProperty(BaseModel):
    owner_id: int
    title: str
    description: str
    cover_photo_url: str
    thumbnail_photo_url: str
    cost_per_night: int
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    province: str
    city: str
    country: str
    street: str
    post_code: str

class PropertyListing(BaseModel):
    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    cover_photo_url: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cost_per_night: int
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None
    active: Optional[bool] = None
    province: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    street: Optional[str] = None
    post_code: Optional[str] = None
    average_rating: Optional[float] = None

class PropertyListResponse(BaseModel):
    properties: List[PropertyListing]

class ReservationListing(PropertyListing):
    start_date: Optional[date] = None
    end_date: Optional[date] = None

class ReservationListResponse(BaseModel):
    reservations: List[ReservationListing]

class CreatedResponse(BaseModel):
    id: int
