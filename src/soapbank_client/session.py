"""Session facade: named, typed operations over the query client.

Each operation binds one catalog template to one result type and delegates
to ``QueryClient``. Operations without a template fail with
``NotImplementedOperationError`` so callers can tell "unsupported" apart from
"the server returned nothing".
"""

from __future__ import annotations

import logging
from typing import List, Optional

from soapbank_client import queries
from soapbank_client.client import QueryClient
from soapbank_client.domain import (
    Hub,
    HubPayload,
    ImpactStats,
    ImpactStatsPayload,
    Payment,
    Pickup,
    PickupScheduleInput,
    PickupScheduleResult,
    PropertiesPayload,
    Property,
    User,
    UserPayload,
)
from soapbank_client.exceptions import NotImplementedOperationError
from soapbank_client.protocols import (
    ImpactDataProvider,
    PaymentDataProvider,
    PickupDataProvider,
    PropertyDataProvider,
    UserDataProvider,
)
from soapbank_client.result import QueryResult

logger = logging.getLogger(__name__)


class SessionFacade(
    UserDataProvider,
    PropertyDataProvider,
    ImpactDataProvider,
    PickupDataProvider,
    PaymentDataProvider,
):
    """Feature-oriented entry point used by presentation code.

    Token handling stays with the query client: ``log_in`` does not extract a
    credential from its response. After an external login flow succeeds the
    caller passes the token to ``provide_token``.
    """

    def __init__(self, client: Optional[QueryClient] = None) -> None:
        self._client = client or QueryClient()

    @property
    def client(self) -> QueryClient:
        return self._client

    @property
    def logged_in(self) -> bool:
        return self._client.logged_in

    def provide_token(self, token: str) -> None:
        self._client.provide_token(token)

    # Users

    async def log_in(self) -> QueryResult[User]:
        result = await self._client.query(UserPayload, queries.LOG_IN)
        return result.map(lambda payload: payload.user)

    async def fetch_user(self, user_id: str) -> QueryResult[User]:
        result = await self._client.query(UserPayload, queries.USER_BY_ID, queries.user_input(user_id))
        return result.map(lambda payload: payload.user)

    # Properties

    async def fetch_properties(self, user_id: str) -> QueryResult[List[Property]]:
        result = await self._client.query(
            PropertiesPayload, queries.PROPERTIES_BY_USER_ID, queries.user_input(user_id)
        )
        return result.map(lambda payload: list(payload.properties))

    async def fetch_hub(self, property_id: str) -> QueryResult[Hub]:
        result = await self._client.query(
            HubPayload, queries.HUB_BY_PROPERTY_ID, queries.property_input(property_id)
        )
        return result.map(lambda payload: payload.hub)

    # Impact

    async def fetch_impact_stats(self, property_id: str) -> QueryResult[ImpactStats]:
        result = await self._client.query(
            ImpactStatsPayload, queries.IMPACT_STATS_BY_PROPERTY_ID, queries.property_input(property_id)
        )
        return result.map(lambda payload: payload.impact_stats)

    # Pickups

    async def fetch_pickups(self, property_id: str) -> QueryResult[List[Pickup]]:
        return await self._client.query(
            List[Pickup], queries.PICKUPS_BY_PROPERTY_ID, queries.property_input(property_id)
        )

    async def schedule_pickup(self, pickup_input: PickupScheduleInput) -> QueryResult[PickupScheduleResult]:
        return self._unimplemented("schedule_pickup")

    # Payments

    async def fetch_payments(self, property_id: str) -> QueryResult[List[Payment]]:
        return self._unimplemented("fetch_payments")

    def _unimplemented(self, operation: str) -> QueryResult:
        logger.debug("%s has no query template", operation)
        return QueryResult.failure(NotImplementedOperationError(operation))

    async def aclose(self) -> None:
        await self._client.aclose()
