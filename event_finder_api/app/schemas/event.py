"""
Pydantic models for normalised event data.

``EventSummary`` is the list-view record: every field is guaranteed to
be present because incomplete upstream records are dropped before
they reach this model.  ``EventDetail`` is the single-event record and
carries ``None`` for anything the upstream payload did not provide.

Fields are declared in snake_case and serialised with the camelCase
names clients expect (``priceMin``, ``dateTimeUTC``, ``nextPage``).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class EventSummary(BaseModel):
    name: str = Field(..., examples=["Summer Jam"])
    id: str = Field(..., examples=["vvG1fZ9pY3KQ8B"])
    date: str = Field(..., examples=["Thu, Jul 4"])
    time: str = Field(..., examples=["7:30 PM"])
    date_time_utc: str = Field(..., alias="dateTimeUTC", examples=["2024-07-04T23:30:00Z"])
    price_min: str = Field(..., alias="priceMin", examples=["25 USD"])
    price_max: str = Field(..., alias="priceMax", examples=["89.5 USD"])
    location: str = Field(..., examples=["Austin, TX"])
    venue: str = Field(..., examples=["Moody Center"])

    model_config = {"populate_by_name": True}


class EventPage(BaseModel):
    """One page of the event list."""

    events: List[EventSummary]
    next_page: Optional[int] = Field(None, alias="nextPage")

    model_config = {"populate_by_name": True}


class EventDetail(BaseModel):
    name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    price_min: Optional[str] = Field(None, alias="priceMin", examples=["$25.00"])
    price_max: Optional[str] = Field(None, alias="priceMax", examples=["$89.50"])
    info: Optional[str] = None
    image: Optional[str] = None
    seatmap: Optional[str] = None
    location: Optional[str] = None
    venue: Optional[str] = None
    address: Optional[str] = Field(None, examples=["1 Main St, 78701"])
    url: Optional[str] = None

    model_config = {"populate_by_name": True}
