"""
people_explorer.people.models - Pydantic models for People responses
=====================================================================

Entities are parsed from the service's PascalCase JSON; unknown
properties are ignored and missing collections default to empty.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _ODataModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class City(_ODataModel):
    name: Optional[str] = Field(default=None, alias="Name")
    country_region: Optional[str] = Field(default=None, alias="CountryRegion")
    region: Optional[str] = Field(default=None, alias="Region")


class AddressInfo(_ODataModel):
    address: Optional[str] = Field(default=None, alias="Address")
    city: Optional[City] = Field(default=None, alias="City")

    def display(self) -> str:
        """Single-line rendering: street, city, region, country."""
        parts = []
        if self.city is not None:
            parts = [p for p in (self.city.name, self.city.region, self.city.country_region) if p and p.strip()]
        city_text = ", ".join(parts)
        if self.address and self.address.strip():
            return f"{self.address}, {city_text}"
        return city_text


class Friend(_ODataModel):
    user_name: Optional[str] = Field(default=None, alias="UserName")
    first_name: Optional[str] = Field(default=None, alias="FirstName")
    last_name: Optional[str] = Field(default=None, alias="LastName")
    gender: Optional[str] = Field(default=None, alias="Gender")
    age: Optional[int] = Field(default=None, alias="Age")
    emails: List[str] = Field(default_factory=list, alias="Emails")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class Trip(_ODataModel):
    trip_id: int = Field(default=0, alias="TripId")
    share_id: Optional[UUID] = Field(default=None, alias="ShareId")
    name: Optional[str] = Field(default=None, alias="Name")
    budget: float = Field(default=0.0, alias="Budget")
    description: Optional[str] = Field(default=None, alias="Description")
    tags: List[str] = Field(default_factory=list, alias="Tags")
    starts_at: Optional[datetime] = Field(default=None, alias="StartsAt")
    ends_at: Optional[datetime] = Field(default=None, alias="EndsAt")


class Person(Friend):
    """
    A person from the ``People`` entity set.

    Friends and Trips are only populated when requested with ``$expand``.
    """
    favorite_feature: Optional[str] = Field(default=None, alias="FavoriteFeature")
    features: List[str] = Field(default_factory=list, alias="Features")
    address_info: List[AddressInfo] = Field(default_factory=list, alias="AddressInfo")
    home_address: Optional[AddressInfo] = Field(default=None, alias="HomeAddress")
    friends: List[Friend] = Field(default_factory=list, alias="Friends")
    trips: List[Trip] = Field(default_factory=list, alias="Trips")


@dataclass
class PaginatedResult:
    """
    One page of people plus paging arithmetic.

    Attributes
    ----------
    items : list of Person
        People on this page
    total_count : int
        Total number of people in the collection
    current_page : int
        One-based page number
    page_size : int
        Requested page size
    """
    items: List[Person] = field(default_factory=list)
    total_count: int = 0
    current_page: int = 1
    page_size: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size == 0 or self.total_count == 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1
