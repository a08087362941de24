# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class ProvinceEnum(str, Enum):
    """Canadian province and territory codes accepted for a property address."""

    ON = "ON"
    BC = "BC"
    AB = "AB"
    QC = "QC"
    MB = "MB"
    SK = "SK"
    NB = "NB"
    NS = "NS"
    PE = "PE"
    NL = "NL"
    YT = "YT"
    NT = "NT"
    NU = "NU"


class UnitTypeEnum(str, Enum):
    """Kind of rentable space within a property."""

    ROOM = "room"
    APARTMENT = "apartment"
    STUDIO = "studio"
    OTHER = "other"


class LeaseStatusEnum(str, Enum):
    """
    Lease lifecycle state.

    A lease starts ACTIVE and transitions once to EXPIRED (ran to term) or
    TERMINATED (ended early). The deposit sub-record is resolved at that
    transition.
    """

    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class PaymentStatusEnum(str, Enum):
    """
    Outcome of a rent payment against its due date.

    ON_TIME and LATE both mean money arrived (cash basis income); MISSED
    means nothing was received and the row only records what was owed.
    """

    ON_TIME = "on_time"
    LATE = "late"
    MISSED = "missed"


class PaymentMethodEnum(str, Enum):
    """How rent arrived."""

    E_TRANSFER = "e-transfer"
    CHEQUE = "cheque"
    CASH = "cash"
    AUTO_DEBIT = "auto-debit"


class ExpenseCategoryEnum(str, Enum):
    """Spending categories tracked for a rental property."""

    MAINTENANCE = "maintenance"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    PROPERTY_TAX = "property_tax"
    MANAGEMENT = "management"
    OTHER = "other"


class ExpenseClassEnum(str, Enum):
    """
    Accounting treatment of an expense.

    Attributes:
        OPEX: Operating expense, deducted in full in the year incurred
        CAPEX: Capital expenditure, depreciated over years through CCA
    """

    OPEX = "opex"
    CAPEX = "capex"


class CCAClassEnum(str, Enum):
    """
    Capital Cost Allowance classes used for rental property (CRA T4036).

    Each class prescribes a fixed declining-balance rate:
    - CLASS_1 (4%): the building itself
    - CLASS_8 (20%): furniture, appliances, equipment
    - CLASS_10 (30%): vehicles used for property management
    - CLASS_12 (100%): small tools and software
    """

    CLASS_1 = "class_1"
    CLASS_8 = "class_8"
    CLASS_10 = "class_10"
    CLASS_12 = "class_12"

    @property
    def prescribed_rate(self) -> Decimal:
        """Declining-balance rate prescribed for this class, as a fraction."""
        return CCA_CLASS_RATES[self]


CCA_CLASS_RATES = {
    CCAClassEnum.CLASS_1: Decimal("0.04"),
    CCAClassEnum.CLASS_8: Decimal("0.20"),
    CCAClassEnum.CLASS_10: Decimal("0.30"),
    CCAClassEnum.CLASS_12: Decimal("1.00"),
}


class BucketGranularity(str, Enum):
    """Calendar bucket used when aggregating dated amounts."""

    MONTH = "month"
    YEAR = "year"

    @property
    def pandas_freq(self) -> str:
        return "M" if self is BucketGranularity.MONTH else "Y"


def enum_to_string(value) -> str:
    """
    Convert enum values to their string representation for pandas storage.

    Examples:
        >>> enum_to_string(ExpenseClassEnum.OPEX)
        'opex'
        >>> enum_to_string("already_string")
        'already_string'
    """
    if isinstance(value, Enum):
        return value.value
    return str(value)
