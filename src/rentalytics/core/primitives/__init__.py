# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentalytics Core Primitives

Building blocks shared by the ledger entities and the analytics engines:
the immutable base model, constrained money and rate types, enums,
settings and validation helpers.
"""

from .enums import (
    CCA_CLASS_RATES,
    BucketGranularity,
    CCAClassEnum,
    ExpenseCategoryEnum,
    ExpenseClassEnum,
    LeaseStatusEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    ProvinceEnum,
    UnitTypeEnum,
    enum_to_string,
)
from .model import Model
from .settings import AnalyticsSettings
from .types import (
    DecimalBetween0And1,
    NonNegativeMoney,
    PositiveInt,
    PositiveMoney,
    PositiveRate,
)
from .validation import ValidationMixin, validate_unique

__all__ = [
    # Core models
    "Model",
    # Settings
    "AnalyticsSettings",
    # Enums
    "BucketGranularity",
    "CCAClassEnum",
    "CCA_CLASS_RATES",
    "ExpenseCategoryEnum",
    "ExpenseClassEnum",
    "LeaseStatusEnum",
    "PaymentMethodEnum",
    "PaymentStatusEnum",
    "ProvinceEnum",
    "UnitTypeEnum",
    "enum_to_string",
    # Types
    "DecimalBetween0And1",
    "NonNegativeMoney",
    "PositiveInt",
    "PositiveMoney",
    "PositiveRate",
    # Validation
    "ValidationMixin",
    "validate_unique",
]
