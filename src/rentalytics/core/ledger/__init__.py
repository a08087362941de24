# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ledger entities, the snapshot the engines read from, and the store boundary.
"""

from .ledger import Ledger
from .records import (
    Asset,
    DepositResolution,
    Expense,
    Lease,
    Payment,
    Property,
    Tenant,
    Unit,
)
from .store import RECORD_TYPES, InMemoryLedgerStore, LedgerStore

__all__ = [
    "Ledger",
    "LedgerStore",
    "InMemoryLedgerStore",
    "RECORD_TYPES",
    "Property",
    "Unit",
    "Tenant",
    "Lease",
    "DepositResolution",
    "Payment",
    "Expense",
    "Asset",
]
