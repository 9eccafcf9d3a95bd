"""Plotly world map of dive sites.

Uses Scattergeo so no map-tile token is needed. Marker colour encodes entry
difficulty; marker size grows with minimum visibility.
"""

from collections.abc import Sequence

import numpy as np
import plotly.graph_objects as go

from divepal.models import DiveSite

_BG = "#e8f4f8"
_LAND = "#f3efe4"
_OCEAN = "#bfe3f2"
_SELECTED = "#ff6b3d"

DIFFICULTY_COLORS: dict[str, str] = {
    "beginner": "#2bb673",
    "intermediate": "#f0a202",
    "advanced": "#d7263d",
}


def nearest_site(
    sites: Sequence[DiveSite], lat: float, lon: float, tolerance: float = 0.1
) -> DiveSite | None:
    """First site whose coordinates lie within `tolerance` degrees on both axes."""
    for site in sites:
        if abs(site.lat - lat) < tolerance and abs(site.lon - lon) < tolerance:
            return site
    return None


def render_site_map(
    sites: Sequence[DiveSite],
    selected_id: int | None = None,
    center: tuple[float, float] | None = None,
) -> go.Figure:
    """Render dive sites as a Plotly geo scatter.

    Args:
        sites: Sites to plot (already filtered by the caller).
        selected_id: Site to highlight, if any.
        center: (lat, lon) to centre and zoom on, e.g. from "Open in map".

    Returns:
        Plotly Figure object. Each point's customdata holds the site id.
    """
    fig = go.Figure()

    for difficulty, color in DIFFICULTY_COLORS.items():
        group = [s for s in sites if s.entry_difficulty == difficulty]
        if not group:
            continue
        vis = np.array([s.visibility_min for s in group], dtype=float)
        sizes = np.clip(6 + vis / 5, 8, 22)
        fig.add_trace(
            go.Scattergeo(
                lat=[s.lat for s in group],
                lon=[s.lon for s in group],
                text=[f"{s.name}<br>{s.location}" for s in group],
                customdata=[s.id for s in group],
                mode="markers",
                marker=dict(
                    size=list(sizes),
                    color=color,
                    opacity=0.85,
                    line=dict(width=1, color="#ffffff"),
                ),
                hoverinfo="text",
                name=difficulty.capitalize(),
            )
        )

    selected = next((s for s in sites if s.id == selected_id), None)
    if selected is not None:
        fig.add_trace(
            go.Scattergeo(
                lat=[selected.lat],
                lon=[selected.lon],
                text=[selected.name],
                customdata=[selected.id],
                mode="markers+text",
                textposition="top center",
                marker=dict(size=24, color=_SELECTED, symbol="star"),
                hoverinfo="text",
                name="Selected",
                showlegend=False,
            )
        )

    projection: dict = dict(type="natural earth")
    geo = dict(
        projection=projection,
        showland=True,
        landcolor=_LAND,
        showocean=True,
        oceancolor=_OCEAN,
        showcountries=True,
        countrycolor="#cccccc",
        bgcolor=_BG,
    )
    if center is not None:
        geo["center"] = dict(lat=center[0], lon=center[1])
        projection["scale"] = 6

    fig.update_layout(
        paper_bgcolor=_BG,
        margin=dict(l=0, r=0, t=0, b=0),
        height=520,
        legend=dict(orientation="h", yanchor="bottom", y=0.01, x=0.01),
        geo=geo,
    )
    return fig
