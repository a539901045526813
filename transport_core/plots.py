# MIT License
"""Charts for comparing freight scenarios.

Cost and CO₂ bars put rail and truck in the same colours on every page.
The route map draws on a plain geo projection, so nothing is fetched
from a tile server.
"""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd
import plotly.graph_objects as go

from .aggregate import co2_breakdown_frame, mode_split_frame
from .insights import Insight
from .params import ScenarioResult

MODE_COLORS = {"rail": "#2563eb", "truck": "#f97316"}


def fig_cost(df: pd.DataFrame) -> go.Figure:
    """Bar chart of annual cost per scenario.

    Parameters
    ----------
    df:
        Dataframe from :func:`~transport_core.aggregate.results_frame`.

    Returns
    -------
    plotly.graph_objects.Figure
        One bar per scenario.
    """
    fig = go.Figure()
    fig.add_bar(x=df["name"], y=df["total_cost_msek"], name="Total cost")
    fig.update_layout(
        title="Total Transport Cost",
        xaxis_title="Scenario",
        yaxis_title="Cost (MSEK/year)",
        template="plotly_white",
    )
    return fig


def fig_co2(results: Iterable[ScenarioResult]) -> go.Figure:
    """Stacked rail/truck CO₂ bars per scenario."""
    df = co2_breakdown_frame(results)
    fig = go.Figure()
    for mode in ("rail", "truck"):
        part = df[df["mode"] == mode]
        fig.add_bar(x=part["name"], y=part["co2_t"], name=f"{mode.title()} CO₂", marker_color=MODE_COLORS[mode])
    fig.update_layout(
        title="CO₂ Emissions by Mode",
        barmode="stack",
        xaxis_title="Scenario",
        yaxis_title="t CO₂e/year",
        template="plotly_white",
    )
    return fig


def fig_mode_split(results: Iterable[ScenarioResult]) -> go.Figure:
    df = mode_split_frame(results)
    fig = go.Figure()
    for mode in ("rail", "truck"):
        part = df[df["mode"] == mode]
        fig.add_bar(x=part["name"], y=part["tons"], name=mode.title(), marker_color=MODE_COLORS[mode])
    fig.update_layout(template="plotly_white", barmode="group", title="Rail Capacity vs Truck Volume", yaxis_title="tons/year")
    return fig


def fig_route_map(results: Iterable[ScenarioResult]) -> go.Figure:
    """Draw each scenario route as a line on an offline geo projection."""
    fig = go.Figure()
    lats: List[float] = []
    lons: List[float] = []
    for r in results:
        lat = [p[0] for p in r.route]
        lon = [p[1] for p in r.route]
        lats.extend(lat)
        lons.extend(lon)
        fig.add_trace(go.Scattergeo(lat=lat, lon=lon, mode="lines+markers", name=r.name))
    fig.update_layout(title="Transport Routes", template="plotly_white", showlegend=True)
    if lats:
        pad = 0.3
        fig.update_geos(
            lataxis_range=[min(lats) - pad, max(lats) + pad],
            lonaxis_range=[min(lons) - pad, max(lons) + pad],
            showcountries=True,
            showland=True,
        )
    return fig


def fig_insight_deltas(insight: Insight) -> go.Figure:
    """Percentage change of cost and CO₂; N/A percentages are left out."""
    labels, values = [], []
    if insight.cost_percentage is not None:
        labels.append("Cost")
        values.append(insight.cost_percentage)
    if insight.co2_percentage is not None:
        labels.append("CO₂")
        values.append(insight.co2_percentage)
    colors = ["#16a34a" if v < 0 else "#dc2626" for v in values]
    fig = go.Figure(go.Bar(x=labels, y=values, marker_color=colors))
    fig.update_layout(
        template="plotly_white",
        title=f"{insight.comparison} vs {insight.baseline}",
        yaxis_title="Change (%)",
    )
    return fig
