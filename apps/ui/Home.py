import streamlit as st

from apps.ui import state as s
from apps.ui.board import BoardController
from apps.ui.client import AcademaClient
from core.logging import configure_logging

ICONS = {"brain": "🧠", "code": "💻", "data": "📊"}

configure_logging()
st.set_page_config(page_title="Academa – Projects", layout="wide")


@st.cache_resource
def get_controller() -> BoardController:
    return BoardController(AcademaClient())


ctl = get_controller()

if "board" not in st.session_state:
    st.session_state.board = ctl.load_projects(s.BoardState())


def update(new_state: s.BoardState) -> None:
    st.session_state.board = new_state
    st.rerun()


@st.fragment(run_every=1)
def banner() -> None:
    # reruns on its own so the banner leaves after its TTL without a click
    current = ctl.tick(st.session_state.board)
    st.session_state.board = current
    if current.notification:
        show = st.success if current.notification.kind == "success" else st.error
        show(current.notification.message)


st.title("Academa – Projects")
banner()
board: s.BoardState = st.session_state.board

# --- cards ---
cols = st.columns(3)
for i, card in enumerate(board.cards):
    with cols[i % 3].container(border=True):
        st.subheader(f"{ICONS.get(card.icon, '📊')} {card.title}")
        if card.description:
            st.caption(card.description)
        if st.button("Open", key=f"open-{i}"):
            update(ctl.select_card(board, card))
        if card.is_project and st.button("🗑 Delete", key=f"del-{card.project_id}"):
            update(ctl.delete_project(board, card.project_id))

with cols[len(board.cards) % 3].container(border=True):
    st.subheader("➕ Upload Project")
    if st.button("New", key="upload"):
        update(s.form_opened(board))

# --- upload form ---
if board.form_visible:
    st.header("Upload Your Project")
    with st.form("upload-project"):
        name = st.text_input("Project Name", value=board.form.project_name)
        description = st.text_area("Project Description", value=board.form.project_description)
        team_size = st.text_input("Team Size", value=board.form.team_size)
        submitted = st.form_submit_button("Submit")
    if submitted:
        new = s.form_field_changed(board, "project_name", name)
        new = s.form_field_changed(new, "project_description", description)
        new = s.form_field_changed(new, "team_size", team_size)
        update(ctl.submit_project(new))
    if st.button("Cancel"):
        update(s.panel_closed(board))

# --- review panel ---
elif board.selection.panel is s.Panel.PROJECT_SELECTED:
    card = board.selection.card
    st.header(f"Project Details: {card.title}")
    st.write(card.description)

    st.subheader("Applications")
    if not board.applications:
        st.info("No applications yet")
    for application in board.applications:
        with st.container(border=True):
            st.markdown(f"**Name:** {application.name}  \n**Email:** {application.email}")
            st.markdown(f"**Experience:** {application.experience}  \n**Year:** {application.year}")
            st.markdown(f"**Cgpa:** {', '.join(str(c) for c in application.cgpa)}")
            st.markdown(f"**Message:** {application.message}")
            st.markdown(f"**Status:** `{application.status.value}`")
            accept, reject = st.columns(2)
            if accept.button("Accept", key=f"accept-{application.id}"):
                update(ctl.review(board, application.id, "accepted"))
            if reject.button("Reject", key=f"reject-{application.id}"):
                update(ctl.review(board, application.id, "rejected"))

    with st.expander("Apply to this project"):
        with st.form("apply"):
            applicant = st.text_input("Name")
            email = st.text_input("Email")
            experience = st.text_area("Experience")
            year = st.text_input("Year")
            cgpa = st.text_input("CGPA (comma separated)")
            message = st.text_area("Message")
            sent = st.form_submit_button("Apply")
        if sent:
            try:
                grades = [float(c) for c in cgpa.split(",") if c.strip()]
            except ValueError:
                update(ctl.notify(board, "error", "CGPA must be a list of numbers."))
            else:
                values = {
                    "name": applicant,
                    "email": email,
                    "experience": experience,
                    "year": year,
                    "cgpa": grades,
                    "message": message,
                }
                update(ctl.apply(board, values))
