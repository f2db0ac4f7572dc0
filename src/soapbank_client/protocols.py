"""Protocol contracts for feature-level data providers.

Presentation code depends on these rather than on the session facade, so a
screen can be driven by a stub provider in tests or previews.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from soapbank_client.domain import (
    Hub,
    ImpactStats,
    Payment,
    Pickup,
    PickupScheduleInput,
    PickupScheduleResult,
    Property,
    User,
)
from soapbank_client.result import QueryResult


@runtime_checkable
class UserDataProvider(Protocol):
    async def log_in(self) -> QueryResult[User]: ...

    async def fetch_user(self, user_id: str) -> QueryResult[User]: ...


@runtime_checkable
class PropertyDataProvider(Protocol):
    async def fetch_properties(self, user_id: str) -> QueryResult[List[Property]]: ...

    async def fetch_hub(self, property_id: str) -> QueryResult[Hub]: ...


@runtime_checkable
class ImpactDataProvider(Protocol):
    async def fetch_impact_stats(self, property_id: str) -> QueryResult[ImpactStats]: ...


@runtime_checkable
class PickupDataProvider(Protocol):
    async def fetch_pickups(self, property_id: str) -> QueryResult[List[Pickup]]: ...

    async def schedule_pickup(self, pickup_input: PickupScheduleInput) -> QueryResult[PickupScheduleResult]: ...


@runtime_checkable
class PaymentDataProvider(Protocol):
    async def fetch_payments(self, property_id: str) -> QueryResult[List[Payment]]: ...
