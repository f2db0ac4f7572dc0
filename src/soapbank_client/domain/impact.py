"""Impact statistics for a property or hub."""

from __future__ import annotations

from typing import Optional

from .base import DomainModel


class ImpactStats(DomainModel):
    """Recycling and community figures. Missing figures are None, not zero."""

    soap_recycled: Optional[int] = None
    linens_recycled: Optional[int] = None
    bottles_recycled: Optional[int] = None
    paper_recycled: Optional[int] = None
    people_served: Optional[int] = None
    women_employed: Optional[int] = None


class ImpactStatsPayload(DomainModel):
    """Payload of ``impactStatsByPropertyId``."""

    impact_stats: ImpactStats
