# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentalytics Core Framework

Ledger entities and snapshot, primitives, calendar bucketing and the shared
decimal calculations used by every analytics engine.
"""

from . import ledger, primitives
from .buckets import aggregate, bucket_key, merge_with_default
from .calculations import LedgerCalculations
from .ledger import (
    Asset,
    DepositResolution,
    Expense,
    InMemoryLedgerStore,
    Lease,
    Ledger,
    LedgerStore,
    Payment,
    Property,
    Tenant,
    Unit,
)
from .primitives import AnalyticsSettings, BucketGranularity, Model

__all__ = [
    "ledger",
    "primitives",
    # Bucketing
    "aggregate",
    "bucket_key",
    "merge_with_default",
    # Calculations
    "LedgerCalculations",
    # Ledger
    "Ledger",
    "LedgerStore",
    "InMemoryLedgerStore",
    "Property",
    "Unit",
    "Tenant",
    "Lease",
    "DepositResolution",
    "Payment",
    "Expense",
    "Asset",
    # Primitives
    "AnalyticsSettings",
    "BucketGranularity",
    "Model",
]
