"""Domain objects decoded from GraphQL payloads.

These models describe the server's data independently of how it is fetched;
the query client validates payloads against them.
"""

from .impact import ImpactStats, ImpactStatsPayload
from .payment import Payment, PaymentMethod
from .pickup import (
    Carton,
    CartonInput,
    CartonProduct,
    CollectionType,
    Pickup,
    PickupProperty,
    PickupScheduleInput,
    PickupScheduleResult,
    PickupStatus,
)
from .property import (
    Address,
    BillingMethod,
    Coordinates,
    HospitalityService,
    Hub,
    HubPayload,
    PropertiesPayload,
    Property,
    PropertyType,
)
from .user import User, UserPayload

__all__ = [
    "Address",
    "BillingMethod",
    "Carton",
    "CartonInput",
    "CartonProduct",
    "CollectionType",
    "Coordinates",
    "HospitalityService",
    "Hub",
    "HubPayload",
    "ImpactStats",
    "ImpactStatsPayload",
    "Payment",
    "PaymentMethod",
    "Pickup",
    "PickupProperty",
    "PickupScheduleInput",
    "PickupScheduleResult",
    "PickupStatus",
    "PropertiesPayload",
    "Property",
    "PropertyType",
    "User",
    "UserPayload",
]
