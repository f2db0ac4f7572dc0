"""Property and hub domain objects."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DomainModel
from .impact import ImpactStats
from .pickup import CollectionType


class PropertyType(str, Enum):
    BED_AND_BREAKFAST = "BED_AND_BREAKFAST"
    GUESTHOUSE = "GUESTHOUSE"
    HOTEL = "HOTEL"
    OTHER = "OTHER"


class BillingMethod(str, Enum):
    ACH = "ACH"
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    INVOICE = "INVOICE"


class HospitalityService(str, Enum):
    BOTTLES = "BOTTLES"
    LINENS = "LINENS"
    OTHER = "OTHER"
    PAPER = "PAPER"
    SOAP = "SOAP"


class Address(DomainModel):
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Coordinates(DomainModel):
    longitude: float
    latitude: float


class Property(DomainModel):
    """A hospitality property that donates used amenities."""

    id: str
    name: str
    property_type: PropertyType
    rooms: int
    services: List[HospitalityService] = Field(default_factory=list)
    collection_type: CollectionType
    logo: Optional[str] = None
    phone: Optional[str] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    coordinates: Optional[Coordinates] = None
    shipping_note: Optional[str] = None
    notes: Optional[str] = None


class Hub(DomainModel):
    """A regional processing hub serving a set of properties."""

    id: str
    name: str
    address: Optional[Address] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    properties: List[Property] = Field(default_factory=list)
    workflow: Optional[str] = None
    impact: Optional[ImpactStats] = None


class PropertiesPayload(DomainModel):
    """Payload of ``propertiesByUserId``."""

    properties: List[Property]


class HubPayload(DomainModel):
    """Payload of ``hubByPropertyId``."""

    hub: Hub
