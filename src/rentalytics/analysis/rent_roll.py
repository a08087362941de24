# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent roll: who is in each unit right now and on what terms.

A snapshot of current occupancy, not of the unit inventory: units without
an active lease are absent.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal
from typing import Optional

from ..core.ledger import Ledger
from ..core.primitives import AnalyticsSettings, Model, UnitTypeEnum
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class RentRollRow(Model):
    unit_label: str
    unit_type: UnitTypeEnum
    tenant: str
    monthly_rent: Decimal
    lease_start: datetime.date
    lease_end: Optional[datetime.date]
    months_tenanted: int
    security_deposit: Optional[Decimal]


def rent_roll(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[RentRollRow]:
    """
    One row per active lease, ordered by unit label.

    ``monthly_rent`` is the lease's agreed rate, not the unit's listed rate.
    ``months_tenanted`` is whole 30-day periods since the lease started as of
    ``settings.as_of``; it is an approximation for display and feeds no
    financial total.
    """
    settings = settings or AnalyticsSettings()

    rows = []
    for lease in ledger.leases:
        if not lease.is_active:
            continue
        unit = ledger.unit_for(lease)
        tenant = ledger.tenant_for(lease)
        rows.append(
            RentRollRow(
                unit_label=unit.label,
                unit_type=unit.unit_type,
                tenant=tenant.full_name,
                monthly_rent=lease.monthly_rent,
                lease_start=lease.start_date,
                lease_end=lease.end_date,
                months_tenanted=(settings.as_of - lease.start_date).days // 30,
                security_deposit=lease.security_deposit,
            )
        )
    rows.sort(key=lambda r: r.unit_label)

    logger.debug(f"Rent roll as of {settings.as_of}: {len(rows)} occupied units")
    return AnalysisTable(name="rent_roll", row_type=RentRollRow, rows=tuple(rows))
