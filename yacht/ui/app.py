"""Yacht — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from yacht.config.settings import configure_logging


_RULES = """\
**Goal:** Fill all 13 categories for the highest total.

**Each turn:**
- Five dice are rolled for you
- Mark dice with **Re-roll**, then **Roll Marked Dice** (up to 3 rolls)
- Move the cursor and **Score** one open category (a 0 is allowed)

**Scoring:**
| Category | Points |
|---|---|
| 1s - 6s | Sum of that face |
| 3 / 4 of a Kind | Sum of all dice |
| Full House | 25 |
| Small Straight (4 in a row) | 30 |
| Large Straight (5 in a row) | 40 |
| 5 of a Kind | 50 |
| Chance | Sum of all dice |

**Upper bonus:** +35 when the 1s - 6s total is over 62.

**Bonus five of a kind:** once 5 of a Kind holds points, every further
five of a kind can be scored there again and adds to it.
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Yacht",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    from yacht.ui.themes import load_css
    load_css()

    if "page" not in st.session_state:
        st.session_state["page"] = "game"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "game":
        from yacht.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from yacht.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "game"
        st.rerun()

    _render_sidebar_rules()


if __name__ == "__main__":
    main()
