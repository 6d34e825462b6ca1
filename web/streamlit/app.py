"""Merit Awards - weekly home-office incentive."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from settings import DISCARD_ONE_RANDOM_BALLOT, ENABLE_EXECUTIVE_BONUS, LOG_LEVEL, LOG_TO_FILE  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import dashboard, nominations, scheduling, voting  # noqa: E402
from web.api.errors import NotFoundError, ValidationError  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Merit Awards", page_icon="🏆", layout="wide")

VOTES_COLOR = "#1E3A8A"
DAYS_COLOR = "#F97316"


@st.cache_resource(show_spinner=False)
def init_logging():
    return setup_logging(LOG_LEVEL, LOG_TO_FILE)


def init_state():
    """Session state is the only mutable state; views get snapshots of it."""
    state = st.session_state
    if "nominations" not in state:
        state.nominations = nominations.get_nominations().items
    if "board" not in state:
        state.board = {v.id: [] for v in voting.get_voters().items}
    if "schedule" not in state:
        state.schedule = {}
    if "schedule_errors" not in state:
        state.schedule_errors = {}
    if "points" not in state:
        state.points = dashboard.get_innovation_points().items
    state.setdefault("discard", DISCARD_ONE_RANDOM_BALLOT)
    state.setdefault("bonus", ENABLE_EXECUTIVE_BONUS)


def board_snapshot() -> dict[str, tuple[str, ...]]:
    return {voter_id: tuple(picks) for voter_id, picks in st.session_state.board.items()}


def results_key() -> tuple:
    state = st.session_state
    return (
        tuple(n.id for n in state.nominations),
        tuple(sorted(board_snapshot().items())),
        state.discard,
        state.bonus,
    )


def current_results():
    """Results for the current inputs. Drawn again only when an input changes."""
    state = st.session_state
    key = results_key()
    if state.get("results_key") != key:
        state.results = voting.get_results(state.nominations, board_snapshot(), state.discard, state.bonus)
        state.results_key = key
        logger.debug("Results recomputed")
    return state.results


def results_chart(items: list) -> go.Figure:
    names = [r.name for r in items]
    return go.Figure(
        data=[
            go.Bar(name="Votes", x=names, y=[r.votes for r in items], marker_color=VOTES_COLOR),
            go.Bar(name="Home-office days", x=names, y=[r.days for r in items], marker_color=DAYS_COLOR),
        ]
    ).update_layout(barmode="group", margin=dict(t=20, b=40, l=40, r=20), height=350)


def candidate_card(c):
    st.markdown(f"**{c.initials} · {c.name}** | {c.title} • {c.team}")
    st.caption(f"{c.project_name or 'Project'}: {c.reason or '-'}")


def dashboard_tab():
    """Weekly summary and rule toggles."""
    state = st.session_state
    overview = dashboard.get_overview(state.nominations, board_snapshot(), state.discard, state.bonus)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.subheader("📊 Weekly Summary")
        cols = st.columns(3)
        cols[0].metric("Voters", overview.voters_count)
        cols[1].metric("Nominees", overview.candidates_count)
        cols[2].metric("Ballots cast", f"{overview.ballots_cast}/{overview.ballots_total}")

    with col2:
        st.subheader("⚙️ Rules")
        st.toggle("Discard one random ballot", key="discard")
        st.toggle("Executive bonus (1-3 days)", key="bonus")
        st.caption("Results are drawn again only when nominations, ballots or rules change.")

    with col3:
        st.subheader("💡 Innovation Points")
        for item in state.points:
            badge = "  `+1 extra day`" if item.extra_day else ""
            st.markdown(f"**{item.person.name}**: {item.points} pts{badge}")


def nominations_tab():
    """Candidate pool and nomination form."""
    state = st.session_state
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("🏅 Nominated Candidates")
        pool = nominations.get_candidate_pool(state.nominations).items
        if not pool:
            st.info("No nominations yet.")
        for c in pool:
            candidate_card(c)

    with col2:
        st.subheader("➕ Add Nomination")
        roster = dashboard.get_roster().items
        members = [p for p in roster if p.role == "Member"]
        voters = voting.get_voters().items
        projects = dashboard.get_projects().items

        with st.form("nomination", clear_on_submit=True):
            candidate = st.selectbox("Candidate", members, index=None, format_func=lambda p: f"{p.name} ({p.team})")
            project = st.selectbox("Project", projects, index=None, format_func=lambda p: p.name)
            reason = st.text_area("Reason", placeholder="Describe the achievement")
            nominator = st.selectbox("Nominated by", voters, index=None, format_func=lambda p: p.name)
            submitted = st.form_submit_button("Add")

        if submitted:
            try:
                item = nominations.add_nomination(
                    candidate.id if candidate else "",
                    project.id if project else "",
                    reason,
                    nominator.id if nominator else "",
                )
            except (ValidationError, NotFoundError) as e:
                st.error(e.message)
            else:
                state.nominations = [*state.nominations, item]
                st.success("Nomination added")


def voting_tab():
    """Each voter ranks up to three nominees."""
    state = st.session_state
    pool = nominations.get_candidate_pool(state.nominations).items
    names = {c.id: c.name for c in pool}
    voters = voting.get_voters()

    if not pool:
        st.info("Nominate someone first.")
        return

    for v in voters.items:
        current = [c for c in state.board.get(v.id, []) if c in names]
        picks = st.multiselect(
            f"Ballot of {v.name} ({v.title})",
            list(names),
            default=current,
            max_selections=voters.slots,
            format_func=lambda cid: names[cid],
            key=f"ballot_{v.id}",
        )
        state.board[v.id] = list(picks)
    st.caption("Selection order is the ranking.")


def results_tab():
    """Ranking and awarded days."""
    results = current_results()

    if results.discarded_voter_name:
        st.warning(f"Randomly discarded the ballot of: {results.discarded_voter_name}")

    if not results.items:
        st.info("No votes yet.")
        return

    st.dataframe(
        [{"#": r.rank, "Candidate": r.name, "Votes": r.votes, "Home-office days": r.days} for r in results.items],
        hide_index=True,
    )
    st.plotly_chart(results_chart(results.items), width="stretch")
    st.caption("Only the top three earn base days. The executive bonus may reach any of the executive's picks.")


def scheduling_tab():
    """Winners pick their dates."""
    state = st.session_state
    options = scheduling.get_schedule_options().dates
    winners = scheduling.get_schedule_candidates(current_results())

    if not winners:
        st.info("No winners yet.")
        return

    for r in winners:
        selected = state.schedule.get(r.candidate_id, [])
        with st.container(border=True):
            st.subheader(f"📅 {r.name}: {r.days} days")
            st.caption(f"Pick {r.days} dates (no Mondays, no consecutive days).")

            cols = st.columns(7)
            for i, d in enumerate(options):
                label = f"✅ {d}" if d in selected else d
                if cols[i % 7].button(label, key=f"day_{r.candidate_id}_{d}"):
                    state.schedule[r.candidate_id] = scheduling.toggle_schedule_date(selected, d)
                    st.rerun()

            if st.button("Validate", key=f"validate_{r.candidate_id}"):
                verdict = scheduling.validate_schedule(r.candidate_id, selected)
                state.schedule_errors[r.candidate_id] = verdict.reason or ""
                logger.info("Schedule for {}: {}", r.candidate_id, verdict.reason or "ok")

            status = scheduling.get_schedule_status(
                len(selected), r.days, state.schedule_errors.get(r.candidate_id, "")
            )
            (st.error if status.is_error else st.success)(status.message)


def admin_tab():
    """Roster and projects."""
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("👥 People")
        st.dataframe(
            [{"Name": p.name, "Role": p.role, "Title": p.title, "Team": p.team} for p in dashboard.get_roster().items],
            hide_index=True,
        )
    with col2:
        st.subheader("📁 Projects")
        for p in dashboard.get_projects().items:
            st.markdown(f"**{p.name}**: {p.description}")


def main():
    init_logging()
    init_state()

    st.title("🏆 Merit Awards")
    st.markdown("*Weekly home-office incentive: nominate, vote, award and schedule*")

    tabs = st.tabs(["📊 Dashboard", "🏅 Nominations", "🗳️ Voting", "🏆 Results", "📅 Scheduling", "⚙️ Admin"])

    with tabs[0]:
        dashboard_tab()
    with tabs[1]:
        nominations_tab()
    with tabs[2]:
        voting_tab()
    with tabs[3]:
        results_tab()
    with tabs[4]:
        scheduling_tab()
    with tabs[5]:
        admin_tab()


if __name__ == "__main__":
    main()
