"""Streamlit dashboard: two monthly precipitation charts driven by one year slider."""

import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import asyncio

import plotly.graph_objects as go
import streamlit as st

from precip_compare.core import Comparator, StatsCardFormatter
from precip_compare.core.formatter import tooltip_text
from precip_compare.core.models import PanelData
from precip_compare.core.series import season_bands
from precip_compare.data_sources import CMIPClient, DatasetLoadError
from precip_compare.utils.config import settings
from precip_compare.utils.constants import MONTHS
from precip_compare.utils.logger import setup_logging

st.set_page_config(
    page_title="Precip Compare",
    page_icon="🌧️",
    layout="wide",
)


@st.cache_resource(show_spinner="Loading precipitation data...")
def get_comparator() -> Comparator:
    setup_logging()
    dataset = asyncio.run(CMIPClient().load())
    return Comparator(dataset, settings)


def build_bar_chart(panel: PanelData, year: int) -> go.Figure:
    chart = settings.chart
    fig = go.Figure()

    # Wet/dry month bands behind the bars
    for month, season in season_bands():
        fig.add_vrect(
            x0=MONTHS.index(month) - 0.5,
            x1=MONTHS.index(month) + 0.5,
            fillcolor=chart.wet_band_color if season == "wet" else chart.dry_band_color,
            line_width=0,
            layer="below",
        )

    fig.add_trace(
        go.Bar(
            x=[MONTHS.index(p.month) for p in panel.series],
            y=[p.value for p in panel.series],
            marker_color=chart.bar_color,
            hovertext=[tooltip_text(p, year, chart.unit) for p in panel.series],
            hoverinfo="text",
            name=panel.label,
        )
    )

    fig.update_layout(
        height=chart.height,
        margin=dict(t=10, r=18, b=38, l=42),
        showlegend=False,
        xaxis=dict(
            title="Month",
            tickmode="array",
            tickvals=list(range(len(MONTHS))),
            ticktext=list(MONTHS),
            range=[-0.5, len(MONTHS) - 0.5],
        ),
        yaxis=dict(title=f"Avg Precipitation ({chart.unit})", range=[0, panel.y_max]),
    )
    return fig


def render_panel(panel: PanelData, year: int):
    st.subheader(panel.header)
    st.caption("🟦 Wet months  🟧 Dry months")
    st.plotly_chart(build_bar_chart(panel, year), width="stretch", config={"displayModeBar": False})

    card = StatsCardFormatter(settings.chart.unit)
    st.markdown(card.format(panel.stats, panel.label))


def main():
    st.title("🌧️ Precip Compare")
    st.markdown("*Monthly mean precipitation under two emissions scenarios*")

    try:
        comparator = get_comparator()
    except DatasetLoadError as e:
        st.error(f"Failed to load data: {e}")
        st.stop()

    slider = comparator.slider
    if not slider.years:
        st.warning("Dataset contains no years.")
        st.stop()

    position = st.select_slider(
        "Year",
        options=slider.positions(),
        format_func=slider.year_at,
        key="year_position",
    )
    result = comparator.compare_position(position)
    st.markdown(f"### {result.year}")

    col1, col2 = st.columns(2)
    with col1:
        render_panel(result.left, result.year)
    with col2:
        render_panel(result.right, result.year)


main()
