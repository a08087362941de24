# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment delinquency by tenant.

Which tenants pay late, how often, and whether the late fees charged to
them are collected. A high late rate combined with a low fee collection
rate is the signal to look at before renewing a lease.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from ..core.calculations import LedgerCalculations
from ..core.ledger import Ledger, Tenant
from ..core.primitives import AnalyticsSettings, Model, PaymentStatusEnum
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class DelinquencyRow(Model):
    tenant_id: int
    tenant: str
    total_payments: int
    late_payments: int
    late_rate_pct: Decimal
    fees_charged: Decimal
    fees_collected: Decimal
    fee_collection_rate_pct: Optional[Decimal]


@dataclass
class _TenantTally:
    tenant: Tenant
    total_payments: int = 0
    late_payments: int = 0
    fees_charged: Decimal = Decimal("0.00")
    fees_collected: Decimal = Decimal("0.00")


def delinquency(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[DelinquencyRow]:
    """
    Late-payment statistics per tenant, worst offenders first.

    Every payment counts toward ``total_payments`` regardless of status.
    Unset fee fields count as zero. ``fee_collection_rate_pct`` is None for
    a tenant who was never charged a fee.

    Ordering: late_payments descending, then late_rate_pct descending, then
    tenant id.
    """
    settings = settings or AnalyticsSettings()
    places = settings.percentage_places

    tallies: Dict[int, _TenantTally] = {}
    for payment in ledger.payments:
        tenant = ledger.tenant_for(ledger.lease_for(payment))
        tally = tallies.setdefault(tenant.id, _TenantTally(tenant=tenant))
        tally.total_payments += 1
        if payment.status == PaymentStatusEnum.LATE:
            tally.late_payments += 1
        tally.fees_charged += payment.late_fee_charged or Decimal("0.00")
        tally.fees_collected += payment.late_fee_collected or Decimal("0.00")

    rows = [
        DelinquencyRow(
            tenant_id=tenant_id,
            tenant=tally.tenant.full_name,
            total_payments=tally.total_payments,
            late_payments=tally.late_payments,
            late_rate_pct=LedgerCalculations.percentage(
                tally.late_payments, tally.total_payments, places
            ),
            fees_charged=tally.fees_charged,
            fees_collected=tally.fees_collected,
            fee_collection_rate_pct=LedgerCalculations.percentage(
                tally.fees_collected, tally.fees_charged, places
            ),
        )
        for tenant_id, tally in tallies.items()
    ]
    rows.sort(key=lambda r: (-r.late_payments, -r.late_rate_pct, r.tenant_id))

    logger.debug(f"Delinquency: {len(rows)} tenants")
    return AnalysisTable(name="delinquency", row_type=DelinquencyRow, rows=tuple(rows))
