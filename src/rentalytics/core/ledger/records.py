# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ledger entity models.

Each class mirrors one table of the landlord's rental ledger. Field
constraints carry the table CHECK constraints so a record that violates
them is rejected at construction, before any engine sees it. The models
have no behavior beyond validation and a few derived accessors.

Ownership:
    Property → Unit → Lease → Payment
             ↘ Expense → Asset
    Tenant → Lease
"""

from __future__ import annotations

import datetime
import re
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ..primitives import (
    CCAClassEnum,
    ExpenseCategoryEnum,
    ExpenseClassEnum,
    LeaseStatusEnum,
    Model,
    NonNegativeMoney,
    PaymentMethodEnum,
    PaymentStatusEnum,
    PositiveInt,
    PositiveMoney,
    PositiveRate,
    ProvinceEnum,
    UnitTypeEnum,
    ValidationMixin,
)

POSTAL_CODE_PATTERN = re.compile(r"^[A-Z][0-9][A-Z] [0-9][A-Z][0-9]$")


class Property(Model):
    """A rental property; root of ownership for units, expenses and assets."""

    id: int
    name: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    province: ProvinceEnum
    postal_code: str

    @field_validator("postal_code")
    @classmethod
    def check_postal_code(cls, value: str) -> str:
        """Canadian postal code format: A1A 1A1"""
        if not POSTAL_CODE_PATTERN.match(value):
            raise ValueError(f"postal_code {value!r} is not in the format A1A 1A1")
        return value


class Unit(Model):
    """
    A rentable unit within a property.

    ``monthly_rent`` is the listed rate for the unit; what a tenant actually
    pays is agreed per lease and may differ.
    """

    id: int
    property_id: int
    label: str = Field(..., min_length=1, max_length=10)
    unit_type: UnitTypeEnum
    square_feet: Optional[PositiveInt] = None
    monthly_rent: PositiveMoney


class Tenant(Model):
    """A person renting a unit; linked to units only through leases."""

    id: int
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class DepositResolution(Model):
    """
    What happened to a lease's security deposit at lease end.

    A collected deposit is a liability owed back to the tenant. All fields
    stay unset (deductions at 0) while the lease is active and are filled
    exactly once when it ends.
    """

    returned_date: Optional[datetime.date] = None
    returned_amount: Optional[NonNegativeMoney] = None
    deductions: NonNegativeMoney = Decimal("0.00")
    deduction_reason: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return (
            self.returned_date is not None
            or self.returned_amount is not None
            or self.deductions > 0
        )


class Lease(Model, ValidationMixin):
    """
    Connects a tenant to a unit for a period.

    ``monthly_rent`` is the agreed rate for the life of the lease, stored on
    the lease rather than read from the unit so history stays accurate when
    the listed rate changes. ``end_date`` of None means ongoing.
    """

    id: int
    unit_id: int
    tenant_id: int
    start_date: datetime.date
    end_date: Optional[datetime.date] = None
    monthly_rent: PositiveMoney
    security_deposit: Optional[NonNegativeMoney] = None
    status: LeaseStatusEnum = LeaseStatusEnum.ACTIVE
    deposit: DepositResolution = Field(default_factory=DepositResolution)

    @model_validator(mode="after")
    def check_lease(self) -> "Lease":
        self.validate_date_ordering(self, "start_date", "end_date")
        if self.status == LeaseStatusEnum.ACTIVE and self.deposit.is_resolved:
            raise ValueError(
                f"Lease {self.id} is active but its deposit is already resolved"
            )
        return self

    @property
    def is_active(self) -> bool:
        return self.status == LeaseStatusEnum.ACTIVE


class Payment(Model, ValidationMixin):
    """
    A rent payment against a lease.

    Late fees only exist on late payments. A missed payment never carries a
    fee; the shortfall is settled from the deposit when the lease ends.
    ``late_fee_collected`` of 0 means the fee was charged but waived.
    """

    id: int
    lease_id: int
    amount: PositiveMoney
    payment_timestamp: datetime.datetime
    due_date: datetime.date
    status: PaymentStatusEnum = PaymentStatusEnum.ON_TIME
    payment_method: PaymentMethodEnum
    late_fee_charged: Optional[NonNegativeMoney] = None
    late_fee_collected: Optional[NonNegativeMoney] = None

    @model_validator(mode="after")
    def check_late_fee(self) -> "Payment":
        self.validate_only_when(
            self, "late_fee_charged", "status", PaymentStatusEnum.LATE
        )
        if self.late_fee_collected is not None and self.late_fee_charged is None:
            raise ValueError("late_fee_collected requires late_fee_charged")
        return self

    @property
    def is_received(self) -> bool:
        """Money arrived (on time or late); missed payments are not income."""
        return self.status != PaymentStatusEnum.MISSED


class Expense(Model):
    """
    A confirmed spend for a property.

    ``unit_id`` of None means a property-wide expense (tax, insurance);
    otherwise the expense is specific to one unit.
    """

    id: int
    property_id: int
    unit_id: Optional[int] = None
    category: ExpenseCategoryEnum
    expense_class: ExpenseClassEnum
    description: Optional[str] = None
    amount: PositiveMoney
    expense_date: datetime.date


class Asset(Model, ValidationMixin):
    """
    A capital asset depreciated through Capital Cost Allowance.

    ``expense_id`` links the capex expense that purchased the asset; None
    means it was acquired before the tracked period. Only the disposal
    fields change after creation.
    """

    id: int
    property_id: int
    unit_id: Optional[int] = None
    expense_id: Optional[int] = None
    description: str = Field(..., min_length=1, max_length=200)
    cca_class: CCAClassEnum
    cca_rate: PositiveRate
    acquisition_date: datetime.date
    acquisition_cost: PositiveMoney
    salvage_value: NonNegativeMoney = Decimal("0.00")
    disposal_date: Optional[datetime.date] = None
    disposal_amount: Optional[NonNegativeMoney] = None

    @model_validator(mode="after")
    def check_disposal(self) -> "Asset":
        if self.disposal_amount is not None and self.disposal_date is None:
            raise ValueError("disposal_amount requires disposal_date")
        if self.disposal_date is not None and self.disposal_date < self.acquisition_date:
            raise ValueError("disposal_date must not be before acquisition_date")
        return self

    @property
    def acquisition_year(self) -> int:
        return self.acquisition_date.year

    @property
    def disposal_year(self) -> Optional[int]:
        return self.disposal_date.year if self.disposal_date is not None else None
