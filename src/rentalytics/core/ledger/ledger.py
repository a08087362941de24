# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Immutable snapshot of the rental ledger.

The Ledger holds every entity collection the engines read, indexes them by
id for the joins the engines perform (payment → lease → tenant, lease →
unit) and checks the cross-row uniqueness constraints that single-record
validation cannot see.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

import pandas as pd

from ..primitives import Model, enum_to_string, validate_unique
from .records import Asset, Expense, Lease, Payment, Property, Tenant, Unit
from .store import RECORD_TYPES, LedgerStore

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Model)

_COLLECTIONS: Dict[type, str] = {
    Property: "properties",
    Unit: "units",
    Tenant: "tenants",
    Lease: "leases",
    Payment: "payments",
    Expense: "expenses",
    Asset: "assets",
}


@dataclass(frozen=True)
class Ledger:
    """
    Read-only snapshot of ledger entities supplied by an external store.

    Engines are pure functions of a Ledger; nothing here is mutated after
    construction, so several engines can read the same snapshot.
    """

    properties: Tuple[Property, ...] = ()
    units: Tuple[Unit, ...] = ()
    tenants: Tuple[Tenant, ...] = ()
    leases: Tuple[Lease, ...] = ()
    payments: Tuple[Payment, ...] = ()
    expenses: Tuple[Expense, ...] = ()
    assets: Tuple[Asset, ...] = ()

    _index: Dict[type, Dict[int, Model]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self):
        for kind, name in _COLLECTIONS.items():
            rows = tuple(getattr(self, name))
            for row in rows:
                if not isinstance(row, kind):
                    raise TypeError(
                        f"{name} must contain {kind.__name__} records, got {type(row).__name__}"
                    )
            object.__setattr__(self, name, rows)
            validate_unique(rows, lambda r: r.id, f"{kind.__name__} id")
            self._index[kind] = {row.id: row for row in rows}

        validate_unique(self.properties, lambda p: p.address, "property address")
        validate_unique(
            self.units, lambda u: (u.property_id, u.label), "unit label within property"
        )
        validate_unique(self.tenants, lambda t: t.email, "tenant email")
        validate_unique(self.tenants, lambda t: t.phone, "tenant phone")

        logger.info(
            f"Ledger snapshot: {len(self.properties)} properties, {len(self.units)} units, "
            f"{len(self.leases)} leases, {len(self.payments)} payments, "
            f"{len(self.expenses)} expenses, {len(self.assets)} assets"
        )

    @classmethod
    def from_store(
        cls,
        store: LedgerStore,
        predicates: Optional[Mapping[type, Callable[[Model], bool]]] = None,
    ) -> "Ledger":
        """
        Build a snapshot by fetching every record type from a store.

        Args:
            store: Source of ledger rows
            predicates: Optional per-type row filters, e.g.
                ``{Payment: lambda p: p.payment_timestamp.year >= 2024}``
        """
        predicates = predicates or {}
        return cls(
            **{
                _COLLECTIONS[kind]: tuple(store.fetch(kind, predicates.get(kind)))
                for kind in RECORD_TYPES
            }
        )

    # === Selection ===

    def select(self, kind: Type[R], predicate: Optional[Callable[[R], bool]] = None) -> List[R]:
        """Rows of ``kind`` in snapshot order, optionally filtered."""
        rows = getattr(self, _COLLECTIONS[kind])
        if predicate is None:
            return list(rows)
        return [row for row in rows if predicate(row)]

    def get(self, kind: Type[R], record_id: int) -> R:
        try:
            return self._index[kind][record_id]
        except KeyError:
            raise KeyError(f"{kind.__name__} {record_id} not found in ledger") from None

    # === Joins ===

    def lease_for(self, payment: Payment) -> Lease:
        return self.get(Lease, payment.lease_id)

    def tenant_for(self, lease: Lease) -> Tenant:
        return self.get(Tenant, lease.tenant_id)

    def unit_for(self, lease: Lease) -> Unit:
        return self.get(Unit, lease.unit_id)

    # === Tabular access ===

    def frame(self, kind: Type[R]) -> pd.DataFrame:
        """
        One kind of record as a DataFrame.

        Enum fields hold their string values and the lease deposit
        sub-record is flattened into ``deposit_*`` columns.
        """
        rows = self.select(kind)
        if not rows:
            return pd.DataFrame(columns=_flat_columns(kind))

        data = []
        for row in rows:
            data.append(
                {
                    key: enum_to_string(value) if isinstance(value, Enum) else value
                    for key, value in _flatten(row.model_dump()).items()
                }
            )
        return pd.DataFrame(data, columns=_flat_columns(kind))

    def __len__(self) -> int:
        return sum(len(getattr(self, name)) for name in _COLLECTIONS.values())


def _flatten(values: dict, prefix: str = "") -> dict:
    flat = {}
    for key, value in values.items():
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{prefix}{key}_"))
        else:
            flat[f"{prefix}{key}"] = value
    return flat


def _flat_columns(kind: type) -> List[str]:
    columns = []
    for name, info in kind.model_fields.items():
        annotation = info.annotation
        if isinstance(annotation, type) and issubclass(annotation, Model):
            columns.extend(f"{name}_{sub}" for sub in annotation.model_fields)
        else:
            columns.append(name)
    return columns
