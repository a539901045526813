"""Streamlit entry point for the freight scenario dashboard.

This script configures logging, seeds the session's scenario store with
the preloaded case study scenarios and shows the overview dashboard.
Building and comparing scenarios live in separate files under the
`pages/` directory.
"""

import logging

import streamlit as st

from transport_core.aggregate import results_frame, summary_totals
from transport_core.dashboard import get_service, get_store, reset_store
from transport_core.plots import fig_co2, fig_cost

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Freight Scenario Dashboard", layout="wide")


def main() -> None:
    store = get_store()

    # --- SIDEBAR ------------------------------------------------------------
    st.sidebar.markdown("### Hissmofors case study")
    st.sidebar.markdown(
        """
        - **Demand:** 720,000 t/year of forest products
        - **Today:** diesel shuttle trains, residual volume by truck
        - **Option:** electrified terminal with full rail capacity
        """
    )
    if st.sidebar.button("Reset to preloaded scenarios"):
        store = reset_store()
    st.sidebar.caption(f"Service status: {get_service().health_check()['status']}")

    # --- MAIN PAGE ------------------------------------------------------------
    st.title("Freight Transport Scenario Dashboard")
    st.markdown(
        """
        Compare how much of the annual tonnage **rail** can carry, what the
        remainder costs by **truck**, and how the split changes **CO₂
        emissions**.  Add your own scenarios on the **Scenario Builder**
        page and compare them on **Compare Scenarios**.
        """
    )

    results = list(store)
    if not results:
        st.info("No scenarios yet. Create one on the Scenario Builder page.")
        return

    totals = summary_totals(results)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Scenarios", totals["count"])
    c2.metric("Total cost", f"{totals['total_cost_msek']:,.2f} MSEK")
    c3.metric("Total CO₂", f"{totals['total_co2_tons']:,} t")
    c4.metric("Average cost", f"{totals['avg_cost_msek']:,.2f} MSEK")

    if len(results) < 2:
        st.caption("Add at least 2 scenarios to enable comparison.")

    df = results_frame(results)
    col_a, col_b = st.columns(2)
    col_a.plotly_chart(fig_cost(df), width="stretch")
    col_b.plotly_chart(fig_co2(results), width="stretch")

    st.subheader("Recent scenarios")
    for r in results[-3:]:
        with st.expander(f"{r.name}: {r.total_cost_msek} MSEK, {r.co2_total_tons:,} t CO₂"):
            if r.description:
                st.caption(r.description)
            for note in r.notes:
                st.markdown(f"- {note}")


if __name__ == "__main__":
    main()
