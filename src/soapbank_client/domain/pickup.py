"""Pickup domain objects: scheduled collections of cartons from a property."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DomainModel


class CollectionType(str, Enum):
    """How cartons get from the property to the hub."""

    COURIER_CONSOLIDATED = "COURIER_CONSOLIDATED"
    COURIER_DIRECT = "COURIER_DIRECT"
    GENERATED_LABEL = "GENERATED_LABEL"
    LOCAL = "LOCAL"
    OTHER = "OTHER"


class PickupStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    OUT_FOR_PICKUP = "OUT_FOR_PICKUP"
    COMPLETE = "COMPLETE"
    CANCELLED = "CANCELLED"


class CartonProduct(str, Enum):
    BOTTLES = "BOTTLES"
    LINENS = "LINENS"
    OTHER = "OTHER"
    PAPER = "PAPER"
    SOAP = "SOAP"


class Carton(DomainModel):
    id: str
    product: Optional[CartonProduct] = None
    percent_full: Optional[int] = None


class PickupProperty(DomainModel):
    """The subset of a property selected alongside a pickup."""

    id: str
    name: Optional[str] = None


class Pickup(DomainModel):
    """A scheduled pickup.

    Attributes:
        id: Server identifier
        confirmation_code: Code shown to the property when scheduling succeeds
        collection_type: How the cartons will be collected
        property: Property the pickup belongs to
        cartons: Cartons included in the pickup, in server order
        status: Current pickup status, if reported
        ready_date: Date the cartons are ready
        pickup_date: Date of the actual collection, once known
        notes: Free-form notes from the property
    """

    id: str
    confirmation_code: str
    collection_type: CollectionType
    property: PickupProperty
    cartons: List[Carton] = Field(default_factory=list)
    status: Optional[PickupStatus] = None
    ready_date: Optional[date] = None
    pickup_date: Optional[date] = None
    notes: Optional[str] = None


class CartonInput(DomainModel):
    product: CartonProduct
    percent_full: int = Field(ge=0, le=100)


class PickupScheduleInput(DomainModel):
    """Caller-supplied details for scheduling a new pickup."""

    property_id: str
    collection_type: CollectionType
    ready_date: date
    cartons: List[CartonInput] = Field(default_factory=list)
    status: PickupStatus = PickupStatus.SUBMITTED
    notes: Optional[str] = None


class PickupScheduleResult(DomainModel):
    """Outcome of scheduling: the created pickup and, if generated, a shipping label."""

    pickup: Optional[Pickup] = None
    label_url: Optional[str] = Field(default=None, alias="labelURL")
