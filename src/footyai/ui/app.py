"""
Streamlit UI for FootyAI – search-grounded match prediction dashboard.

Run from project root:

    streamlit run src/footyai/ui/app.py
"""

from __future__ import annotations

import sys
from functools import partial
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure the project src/ directory is on sys.path so that:
#   from footyai.analysis.analyzer import ...
# works when running via "streamlit run src/footyai/ui/app.py"
# from the project root.
# ---------------------------------------------------------------------------
SRC_ROOT = Path(__file__).resolve().parents[2]  # .../footyai/src
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from footyai.analysis.analyzer import AnalyzerConfig, analyze_match  # noqa: E402
from footyai.auth.credentials import CredentialManager, SessionKeySelector  # noqa: E402
from footyai.config import settings  # noqa: E402
from footyai.data.schema import (  # noqa: E402
    SPORT_DISPLAY,
    AnalysisResponse,
    MatchRequest,
    PredictionItem,
    Sport,
)
from footyai.ui.formatting import (  # noqa: E402
    TIER_COLORS,
    category_frame,
    format_probability,
    is_strong_pick,
    probability_tier,
)
from footyai.ui.state import (  # noqa: E402
    AppState,
    handle_connect,
    handle_reset,
    handle_submit,
    validate_form,
)

BILLING_DOCS_URL = "https://ai.google.dev/gemini-api/docs/billing"


def get_app_state() -> AppState:
    """Return the per-session AppState, creating it on first run."""
    if "app_state" not in st.session_state:
        st.session_state["app_state"] = AppState()
    return st.session_state["app_state"]


def get_credentials(pending_key: str | None = None) -> CredentialManager:
    selector = SessionKeySelector(st.session_state, pending_key=pending_key)
    return CredentialManager(env_key=settings.gemini_api_key, selector=selector)


def render_connect_screen(state: AppState) -> None:
    """Shown when no API key is available."""
    st.header("⚡ Connect AI Analytics")
    st.write(
        "To fetch live match data from across the web, you must connect a "
        "Google Gemini API key."
    )

    with st.form("connect_form"):
        key = st.text_input("Gemini API key", type="password")
        submitted = st.form_submit_button(
            "Connect Gemini Engine", use_container_width=True
        )

    if submitted:
        handle_connect(state, get_credentials(pending_key=key))
        st.rerun()

    st.markdown(f"[Learn about API Billing & Setup →]({BILLING_DOCS_URL})")


def render_match_form(state: AppState) -> None:
    """Sport selector, team inputs and the submit button."""
    sport_options = list(SPORT_DISPLAY.keys())

    with st.form("match_form"):
        sport = st.radio(
            "Sport",
            options=sport_options,
            format_func=lambda s: f"{SPORT_DISPLAY[s]['icon']} {SPORT_DISPLAY[s]['label']}",
            horizontal=True,
            index=sport_options.index(Sport.FOOTBALL),
        )
        col_home, col_away = st.columns(2)
        with col_home:
            home_team = st.text_input("Home / Team 1", placeholder="Team A")
        with col_away:
            away_team = st.text_input("Away / Team 2", placeholder="Team B")
        league = st.text_input(
            "Tournament info", placeholder="e.g. World Cup, IPL, NBA"
        )
        submitted = st.form_submit_button(
            "Generate Prediction Engine",
            use_container_width=True,
            disabled=state.loading,
        )

    if not submitted:
        return

    if not validate_form(home_team, away_team):
        st.warning("Please enter both teams.")
        return

    request = MatchRequest(
        home_team=home_team, away_team=away_team, league=league, sport=sport
    )
    credentials = get_credentials()
    config = AnalyzerConfig.from_settings(credentials.resolve_api_key())

    with st.spinner(
        "Deep web search in progress: scanning live form, H2H history and "
        "injury reports..."
    ):
        handle_submit(
            state, request, partial(analyze_match, config=config), credentials
        )

    if not state.has_key:
        st.rerun()


def render_market_row(item: PredictionItem) -> None:
    color = TIER_COLORS[probability_tier(item.probability)]
    st.markdown(
        f"**{item.market_name}** :{color}[{format_probability(item.probability)}]"
    )
    st.caption(item.explanation)
    # Bar is clamped for display only; the data itself is not validated
    bar = min(max(item.probability, 0.0), 100.0) / 100.0
    st.progress(bar, text="Strong pick" if is_strong_pick(item.probability) else None)


def render_dashboard(data: AnalysisResponse) -> None:
    """Teams header, grounding sources and one card per category."""
    st.caption("LIVE SEARCH ANALYSIS ACTIVE")
    col_home, col_vs, col_away = st.columns([5, 1, 5])
    with col_home:
        st.subheader(data.home_team.upper())
    with col_vs:
        st.markdown("**VS**")
    with col_away:
        st.subheader(data.away_team.upper())

    if data.sources:
        with st.expander("🔗 Live Data Grounding Sources", expanded=True):
            for source in data.sources:
                st.markdown(f"- [{source.title}]({source.uri})")

    table_view = st.toggle("Table view", value=False)

    columns = st.columns(3)
    for idx, category in enumerate(data.categories):
        with columns[idx % 3]:
            with st.container(border=True):
                st.markdown(f"**{category.title}**")
                st.caption(f"{len(category.items)} Options")
                if table_view:
                    st.dataframe(
                        category_frame(category),
                        use_container_width=True,
                        hide_index=True,
                    )
                else:
                    for item in category.items:
                        render_market_row(item)

    st.info(
        "Verified web data analysis: AI has cross-referenced real-time H2H "
        "stats and news. Powered by the Gemini Google Search tool."
    )


def main() -> None:
    st.set_page_config(page_title="FootyAI Pro – Live Match Intelligence", layout="wide")

    state = get_app_state()

    if "credentials_checked" not in st.session_state:
        state.has_key = get_credentials().check()
        st.session_state["credentials_checked"] = True

    if not state.has_key and not settings.gemini_api_key:
        if state.error:
            st.error(state.error)
        render_connect_screen(state)
        return

    with st.sidebar:
        st.markdown("### FootyAI Pro")
        st.caption("SEARCH-GROUNDED ENGINE")
        if st.button("Reset Engine"):
            handle_reset(state)
            st.rerun()

    st.title("LIVE TACTICAL INTELLIGENCE")
    st.markdown(
        "Real-time analysis powered by Google Search grounding and Gemini."
    )

    render_match_form(state)

    if state.error:
        st.error(state.error)
    elif state.result is not None and not state.loading:
        render_dashboard(state.result)


if __name__ == "__main__":
    main()
