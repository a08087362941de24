# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Analysis result containers.

Every engine emits an ordered sequence of flat rows. Column names, types
and row order are the compatibility surface for downstream presentation
layers, so each table carries its row model and renders a DataFrame with
the columns in declared order.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Generic, Iterator, List, Tuple, Type, TypeVar

import pandas as pd

from ..core.primitives import Model

RowT = TypeVar("RowT", bound=Model)


@dataclass(frozen=True)
class AnalysisTable(Generic[RowT]):
    """
    Ordered, immutable output of one engine.

    Attributes:
        name: Engine/report name (e.g. "cash_flow")
        row_type: Row model class; its fields are the table columns
        rows: Rows in the engine's specified order
    """

    name: str
    row_type: Type[RowT]
    rows: Tuple[RowT, ...] = ()

    @property
    def columns(self) -> List[str]:
        return list(self.row_type.model_fields)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Rows as a DataFrame, one column per row field in declared order.

        Monetary columns hold Decimals and undefined ratios hold None so the
        values are exactly what the engine computed.
        """
        return pd.DataFrame(
            [row.model_dump() for row in self.rows], columns=self.columns
        )

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[RowT]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> RowT:
        return self.rows[index]


@dataclass(frozen=True)
class PortfolioReport:
    """
    Combined output of every engine over one ledger snapshot.

    Attributes:
        cash_flow: Monthly income, expenses and net profit
        delinquency: Late-payment and fee-collection statistics per tenant
        vacancy: Gaps between consecutive leases per unit
        expense_breakdown: Opex/capex split per expense category
        rent_roll: Active leases as of the snapshot date
        yoy: Yearly totals with prior-year income change
        depreciation: CCA schedule rows for every asset
        deposits: Security deposit reconciliation per lease
    """

    cash_flow: AnalysisTable
    delinquency: AnalysisTable
    vacancy: AnalysisTable
    expense_breakdown: AnalysisTable
    rent_roll: AnalysisTable
    yoy: AnalysisTable
    depreciation: AnalysisTable
    deposits: AnalysisTable

    def tables(self) -> Dict[str, AnalysisTable]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_dataframes(self) -> Dict[str, pd.DataFrame]:
        return {name: table.to_dataframe() for name, table in self.tables().items()}
