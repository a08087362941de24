# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test fixtures for Rentalytics testing.

The ``hamilton_ledger`` fixture is a small ledger modeled on an 8-room house
in Hamilton, ON, trimmed to three rooms with the interesting history: R1 is
continuously occupied, R3 turned over with a one-day gap after a terminated
lease, and R5 sat vacant for three months after a lease expired.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from rentalytics.core.ledger import (
    Asset,
    DepositResolution,
    Expense,
    InMemoryLedgerStore,
    Lease,
    Ledger,
    Payment,
    Property,
    Tenant,
    Unit,
)
from rentalytics.core.primitives import (
    AnalyticsSettings,
    CCAClassEnum,
    ExpenseCategoryEnum,
    ExpenseClassEnum,
    LeaseStatusEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    ProvinceEnum,
    UnitTypeEnum,
)

D = Decimal


# Record Utilities
def make_payment(
    payment_id: int,
    lease_id: int,
    amount: str,
    paid: datetime,
    status: PaymentStatusEnum = PaymentStatusEnum.ON_TIME,
    fee_charged: str = None,
    fee_collected: str = None,
    method: PaymentMethodEnum = PaymentMethodEnum.E_TRANSFER,
) -> Payment:
    """Create a payment due on the 1st of the month it was paid in."""
    return Payment(
        id=payment_id,
        lease_id=lease_id,
        amount=D(amount),
        payment_timestamp=paid,
        due_date=paid.date().replace(day=1),
        status=status,
        payment_method=method,
        late_fee_charged=D(fee_charged) if fee_charged is not None else None,
        late_fee_collected=D(fee_collected) if fee_collected is not None else None,
    )


def make_expense(
    expense_id: int,
    category: ExpenseCategoryEnum,
    expense_class: ExpenseClassEnum,
    amount: str,
    spent: date,
    unit_id: int = None,
) -> Expense:
    return Expense(
        id=expense_id,
        property_id=1,
        unit_id=unit_id,
        category=category,
        expense_class=expense_class,
        description=f"{category.value} {spent.isoformat()}",
        amount=D(amount),
        expense_date=spent,
    )


@pytest.fixture
def maple_street() -> Property:
    return Property(
        id=1,
        name="Maple House",
        address="142 Maple Street",
        city="Hamilton",
        province=ProvinceEnum.ON,
        postal_code="L8P 1A1",
    )


@pytest.fixture
def hamilton_store(maple_street) -> InMemoryLedgerStore:
    """Store holding the Hamilton ledger records."""
    units = [
        Unit(id=1, property_id=1, label="R1", unit_type=UnitTypeEnum.ROOM, square_feet=140, monthly_rent=D("780.00")),
        Unit(id=3, property_id=1, label="R3", unit_type=UnitTypeEnum.ROOM, square_feet=160, monthly_rent=D("875.00")),
        Unit(id=5, property_id=1, label="R5", unit_type=UnitTypeEnum.ROOM, monthly_rent=D("775.00")),
    ]
    tenants = [
        Tenant(id=1, first_name="James", last_name="Wilson", email="james.wilson@example.com", phone="905-555-0101"),
        Tenant(id=3, first_name="Michael", last_name="Okafor", email="m.okafor@example.com", phone="905-555-0103"),
        Tenant(id=5, first_name="David", last_name="Kim", email="dkim@example.com"),
        Tenant(id=9, first_name="Lucas", last_name="Nguyen", phone="905-555-0109"),
        Tenant(id=10, first_name="Olivia", last_name="Tremblay"),
    ]
    leases = [
        Lease(
            id=1, unit_id=1, tenant_id=1, start_date=date(2024, 1, 1),
            monthly_rent=D("750.00"), security_deposit=D("750.00"),
        ),
        Lease(
            id=3, unit_id=3, tenant_id=3,
            start_date=date(2024, 1, 1), end_date=date(2024, 10, 31),
            monthly_rent=D("850.00"), security_deposit=D("850.00"),
            status=LeaseStatusEnum.TERMINATED,
            deposit=DepositResolution(
                returned_date=date(2024, 11, 15),
                returned_amount=D("0.00"),
                deductions=D("850.00"),
                deduction_reason="Applied to unpaid August 2024 rent ($850.00)",
            ),
        ),
        Lease(
            id=5, unit_id=5, tenant_id=5,
            start_date=date(2024, 1, 1), end_date=date(2024, 5, 31),
            monthly_rent=D("750.00"), security_deposit=D("750.00"),
            status=LeaseStatusEnum.EXPIRED,
            deposit=DepositResolution(returned_date=date(2024, 6, 15), returned_amount=D("750.00")),
        ),
        Lease(
            id=9, unit_id=3, tenant_id=9, start_date=date(2024, 11, 1),
            monthly_rent=D("875.00"), security_deposit=D("875.00"),
        ),
        Lease(
            id=10, unit_id=5, tenant_id=10, start_date=date(2024, 9, 1),
            monthly_rent=D("775.00"), security_deposit=D("775.00"),
        ),
    ]
    late = PaymentStatusEnum.LATE
    payments = [
        make_payment(1, 1, "750.00", datetime(2024, 1, 2, 9, 15)),
        make_payment(2, 1, "750.00", datetime(2024, 2, 9, 18, 0), late, "50.00", "50.00"),
        make_payment(3, 3, "850.00", datetime(2024, 1, 3, 12, 0), method=PaymentMethodEnum.CHEQUE),
        make_payment(4, 3, "850.00", datetime(2024, 8, 3, 0, 0), PaymentStatusEnum.MISSED, method=PaymentMethodEnum.CHEQUE),
        make_payment(5, 5, "750.00", datetime(2024, 1, 1, 7, 0), method=PaymentMethodEnum.AUTO_DEBIT),
        make_payment(6, 1, "750.00", datetime(2025, 1, 2, 10, 30)),
        make_payment(7, 1, "750.00", datetime(2025, 2, 10, 20, 45), late, "50.00", "0.00"),
        make_payment(8, 9, "875.00", datetime(2025, 1, 2, 8, 0)),
    ]
    expenses = [
        make_expense(1, ExpenseCategoryEnum.PROPERTY_TAX, ExpenseClassEnum.OPEX, "300.00", date(2024, 1, 15)),
        make_expense(2, ExpenseCategoryEnum.MAINTENANCE, ExpenseClassEnum.OPEX, "120.00", date(2024, 3, 10), unit_id=1),
        make_expense(3, ExpenseCategoryEnum.MAINTENANCE, ExpenseClassEnum.CAPEX, "680.00", date(2024, 8, 8), unit_id=5),
        make_expense(4, ExpenseCategoryEnum.INSURANCE, ExpenseClassEnum.OPEX, "100.00", date(2025, 2, 20)),
        make_expense(5, ExpenseCategoryEnum.UTILITIES, ExpenseClassEnum.OPEX, "80.00", date(2024, 1, 20)),
    ]
    assets = [
        Asset(
            id=1, property_id=1, description="142 Maple Street residential building",
            cca_class=CCAClassEnum.CLASS_1, cca_rate=D("0.0400"),
            acquisition_date=date(2019, 9, 1), acquisition_cost=D("320000.00"),
        ),
        Asset(
            id=2, property_id=1, unit_id=5, expense_id=3, description="Refrigerator - Room R5",
            cca_class=CCAClassEnum.CLASS_8, cca_rate=D("0.2000"),
            acquisition_date=date(2024, 8, 8), acquisition_cost=D("680.00"),
        ),
    ]
    return InMemoryLedgerStore(
        [maple_street, *units, *tenants, *leases, *payments, *expenses, *assets]
    )


@pytest.fixture
def hamilton_ledger(hamilton_store) -> Ledger:
    return Ledger.from_store(hamilton_store)


@pytest.fixture
def year_end_settings() -> AnalyticsSettings:
    """Year-end 2025 report over the two complete years."""
    return AnalyticsSettings(yoy_years={2024, 2025}, as_of=date(2025, 12, 31))


@pytest.fixture
def empty_ledger() -> Ledger:
    return Ledger()
