# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Security deposit reconciliation.

A collected deposit is a liability: it is owed back to the tenant until the
lease ends and the deposit is resolved as a refund, deductions (unpaid
rent, damages), or both.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal
from typing import Optional

from ..core.ledger import Lease, Ledger
from ..core.primitives import AnalyticsSettings, LeaseStatusEnum, Model
from .results import AnalysisTable

logger = logging.getLogger(__name__)


class DepositRow(Model):
    lease_id: int
    tenant: str
    unit_label: str
    status: LeaseStatusEnum
    security_deposit: Decimal
    deductions: Decimal
    returned_amount: Optional[Decimal]
    returned_date: Optional[datetime.date]
    deduction_reason: Optional[str]
    outstanding: Decimal


def outstanding_deposit(lease: Lease) -> Decimal:
    """Part of the deposit neither refunded nor withheld; all of it while unresolved."""
    if lease.security_deposit is None:
        return Decimal("0.00")
    returned = lease.deposit.returned_amount or Decimal("0.00")
    return lease.security_deposit - lease.deposit.deductions - returned


def deposits(
    ledger: Ledger, settings: Optional[AnalyticsSettings] = None
) -> AnalysisTable[DepositRow]:
    """
    One row per lease holding a security deposit, ordered by lease id.

    A non-zero ``outstanding`` on an ended lease means the resolution does
    not account for the whole deposit.
    """
    rows = []
    for lease in sorted(ledger.leases, key=lambda lease: lease.id):
        if lease.security_deposit is None:
            continue
        outstanding = outstanding_deposit(lease)
        if not lease.is_active and outstanding != 0:
            logger.warning(
                f"Lease {lease.id} ended with {outstanding} of its deposit unaccounted for"
            )
        rows.append(
            DepositRow(
                lease_id=lease.id,
                tenant=ledger.tenant_for(lease).full_name,
                unit_label=ledger.unit_for(lease).label,
                status=lease.status,
                security_deposit=lease.security_deposit,
                deductions=lease.deposit.deductions,
                returned_amount=lease.deposit.returned_amount,
                returned_date=lease.deposit.returned_date,
                deduction_reason=lease.deposit.deduction_reason,
                outstanding=outstanding,
            )
        )

    logger.debug(f"Deposits: {len(rows)} leases with a deposit")
    return AnalysisTable(name="deposits", row_type=DepositRow, rows=tuple(rows))


def deposit_liability(ledger: Ledger) -> Decimal:
    """Total deposits currently held against active leases."""
    return sum(
        (
            outstanding_deposit(lease)
            for lease in ledger.leases
            if lease.status == LeaseStatusEnum.ACTIVE
        ),
        Decimal("0.00"),
    )
