# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for security deposit reconciliation.
"""

from datetime import date
from decimal import Decimal

from rentalytics.analysis import deposit_liability, deposits, outstanding_deposit
from rentalytics.core.ledger import DepositResolution, Lease, Ledger
from rentalytics.core.primitives import LeaseStatusEnum

D = Decimal


def _with_leases(ledger: Ledger, *leases: Lease) -> Ledger:
    return Ledger(
        properties=ledger.properties, units=ledger.units, tenants=ledger.tenants,
        leases=leases,
    )


class TestDeposits:
    def test_rows_ordered_by_lease(self, hamilton_ledger):
        table = deposits(hamilton_ledger)
        assert [(r.lease_id, r.outstanding) for r in table] == [
            (1, D("750.00")),
            (3, D("0.00")),
            (5, D("0.00")),
            (9, D("875.00")),
            (10, D("775.00")),
        ]

    def test_deduction_applied_to_unpaid_rent(self, hamilton_ledger):
        row = next(r for r in deposits(hamilton_ledger) if r.lease_id == 3)
        assert row.tenant == "Michael Okafor"
        assert row.unit_label == "R3"
        assert row.status == LeaseStatusEnum.TERMINATED
        assert row.deductions == D("850.00")
        assert row.returned_amount == D("0.00")
        assert row.returned_date == date(2024, 11, 15)
        assert "unpaid August 2024 rent" in row.deduction_reason

    def test_active_lease_deposit_is_unresolved(self, hamilton_ledger):
        row = next(r for r in deposits(hamilton_ledger) if r.lease_id == 1)
        assert row.returned_amount is None
        assert row.returned_date is None
        assert row.deductions == D("0.00")

    def test_lease_without_deposit_skipped(self, hamilton_ledger):
        lease = Lease(
            id=20, unit_id=1, tenant_id=1, start_date=date(2023, 1, 1),
            end_date=date(2023, 12, 31), monthly_rent=D("700.00"),
            status=LeaseStatusEnum.EXPIRED,
        )
        assert len(deposits(_with_leases(hamilton_ledger, lease))) == 0

    def test_unaccounted_deposit_warns(self, hamilton_ledger, caplog):
        lease = Lease(
            id=20, unit_id=1, tenant_id=1, start_date=date(2023, 1, 1),
            end_date=date(2023, 12, 31), monthly_rent=D("700.00"),
            security_deposit=D("700.00"), status=LeaseStatusEnum.EXPIRED,
            deposit=DepositResolution(returned_date=date(2024, 1, 10), returned_amount=D("650.00")),
        )
        (row,) = deposits(_with_leases(hamilton_ledger, lease))
        assert row.outstanding == D("50.00")
        assert "Lease 20 ended with 50.00" in caplog.text

    def test_outstanding_deposit(self, hamilton_ledger):
        leases = {lease.id: lease for lease in hamilton_ledger.leases}
        assert outstanding_deposit(leases[1]) == D("750.00")
        assert outstanding_deposit(leases[5]) == D("0.00")

    def test_liability_counts_active_leases(self, hamilton_ledger):
        assert deposit_liability(hamilton_ledger) == D("2400.00")

    def test_empty_ledger(self, empty_ledger):
        assert len(deposits(empty_ledger)) == 0
        assert deposit_liability(empty_ledger) == D("0.00")
