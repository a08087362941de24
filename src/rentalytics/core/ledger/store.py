# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Input boundary between an external ledger store and the analytics engines.

The store's query and transaction mechanics are out of scope; the only
contract is "provide all rows of type T matching an optional predicate".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Type, TypeVar

from ..primitives import Model
from .records import Asset, Expense, Lease, Payment, Property, Tenant, Unit

RECORD_TYPES = (Property, Unit, Tenant, Lease, Payment, Expense, Asset)

R = TypeVar("R", bound=Model)
Predicate = Callable[[R], bool]


class LedgerStore(ABC):
    """Source of ledger rows (file, database or in-memory fixture)."""

    @abstractmethod
    def fetch(self, kind: Type[R], predicate: Optional[Predicate] = None) -> Sequence[R]:
        """
        Return every row of ``kind`` for which ``predicate`` holds.

        Args:
            kind: Record class to fetch (e.g. ``Payment``)
            predicate: Optional row filter (date range, id set, ...)
        """
        pass


class InMemoryLedgerStore(LedgerStore):
    """
    Ledger store over plain lists of records.

    Example:
        ```python
        store = InMemoryLedgerStore([prop, unit, tenant, lease])
        store.add(payment)
        ledger = Ledger.from_store(store)
        ```
    """

    def __init__(self, records: Iterable[Model] = ()):
        self._rows: Dict[type, List[Model]] = {kind: [] for kind in RECORD_TYPES}
        self.add(*records)

    def add(self, *records: Model) -> None:
        for record in records:
            kind = type(record)
            if kind not in self._rows:
                raise TypeError(f"Unsupported ledger record type: {kind.__name__}")
            self._rows[kind].append(record)

    def fetch(self, kind: Type[R], predicate: Optional[Predicate] = None) -> Sequence[R]:
        if kind not in self._rows:
            raise TypeError(f"Unsupported ledger record type: {kind.__name__}")
        rows = self._rows[kind]
        if predicate is None:
            return list(rows)
        return [row for row in rows if predicate(row)]
