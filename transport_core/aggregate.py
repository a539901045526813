# MIT License
"""Tabular views of computed scenarios.

Functions in this module flatten a sequence of
:class:`~transport_core.params.ScenarioResult` into pandas DataFrames
for the comparison table, the charts and the CSV export.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .params import ScenarioResult
from .utils import round_half_up

TABLE_COLUMNS = [
    "name",
    "transport_mode",
    "tonnage",
    "train_frequency",
    "distance_to_terminal",
    "distance_to_customer",
    "rail_capacity_tons",
    "truck_volume_tons",
    "total_cost_msek",
    "co2_rail_tons",
    "co2_truck_tons",
    "co2_total_tons",
]


def results_frame(results: Iterable[ScenarioResult]) -> pd.DataFrame:
    """One row per scenario with inputs and KPIs.

    Also adds ``rail_share``: the fraction of demand rail can cover,
    capped at 1.

    Returns
    -------
    pandas.DataFrame
        Columns :data:`TABLE_COLUMNS` plus ``rail_share`` and ``notes``
        (joined with ``"; "``).  Empty input gives an empty frame with
        the same columns.
    """
    rows = []
    for r in results:
        row = {c: getattr(r, c) for c in TABLE_COLUMNS}
        row["notes"] = "; ".join(r.notes)
        rows.append(row)
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS + ["notes"])
    if df.empty:
        df["rail_share"] = pd.Series(dtype=float)
        return df
    df["rail_share"] = (df["rail_capacity_tons"] / df["tonnage"]).clip(upper=1.0)
    return df


def mode_split_frame(results: Iterable[ScenarioResult]) -> pd.DataFrame:
    """Long format tonnage split: columns name, mode, tons."""
    rows = []
    for r in results:
        rows.append(dict(name=r.name, mode="rail", tons=r.rail_capacity_tons))
        rows.append(dict(name=r.name, mode="truck", tons=r.truck_volume_tons))
    return pd.DataFrame(rows, columns=["name", "mode", "tons"])


def co2_breakdown_frame(results: Iterable[ScenarioResult]) -> pd.DataFrame:
    """Long format emissions: columns name, mode, co2_t."""
    rows = []
    for r in results:
        rows.append(dict(name=r.name, mode="rail", co2_t=r.co2_rail_tons))
        rows.append(dict(name=r.name, mode="truck", co2_t=r.co2_truck_tons))
    return pd.DataFrame(rows, columns=["name", "mode", "co2_t"])


def summary_totals(results: Iterable[ScenarioResult]) -> dict:
    """Headline figures across all stored scenarios.

    Returns
    -------
    dict
        ``count``, ``total_cost_msek`` and ``total_co2_tons`` summed over
        the scenarios, and ``avg_cost_msek`` (0 when there are none).
    """
    results = list(results)
    total_cost = round_half_up(sum(r.total_cost_msek for r in results), 2)
    return dict(
        count=len(results),
        total_cost_msek=total_cost,
        total_co2_tons=sum(r.co2_total_tons for r in results),
        avg_cost_msek=round_half_up(total_cost / len(results), 2) if results else 0.0,
    )
