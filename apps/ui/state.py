"""
Client-side state for the project board.

``BoardState`` is immutable; every change goes through one of the reducer
functions below, which take a state (plus inputs) and return a new state.
Nothing in here performs I/O; ``apps.ui.board`` does the HTTP calls and
feeds their results in.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from domain.models import Application, Project


class Panel(str, Enum):
    CLOSED = "closed"
    FORM_OPEN = "form-open"
    PROJECT_SELECTED = "project-selected"


@dataclass(frozen=True)
class Card:
    title: str
    description: str
    icon: str = "data"
    project_id: Optional[str] = None

    @property
    def is_project(self) -> bool:
        return self.project_id is not None


STATIC_CARDS: Tuple[Card, ...] = (
    Card("AI/ML", "Learn Artificial Intelligence and Machine Learning concepts.", "brain"),
    Card("Web Development", "Dive into modern web development technologies.", "code"),
    Card("Data Science", "Master data science techniques and tools.", "data"),
)


@dataclass(frozen=True)
class ProjectForm:
    project_name: str = ""
    project_description: str = ""
    team_size: str = ""

    def payload(self) -> dict[str, str]:
        return {
            "projectName": self.project_name,
            "projectDescription": self.project_description,
            "teamSize": self.team_size,
        }


FORM_FIELDS = frozenset(f.name for f in fields(ProjectForm))


@dataclass(frozen=True)
class Selection:
    panel: Panel = Panel.CLOSED
    card: Optional[Card] = None

    @property
    def project_id(self) -> Optional[str]:
        return self.card.project_id if self.card else None


@dataclass(frozen=True)
class Notification:
    kind: str  # success | error
    message: str
    expires_at: float


@dataclass(frozen=True)
class BoardState:
    cards: Tuple[Card, ...] = STATIC_CARDS
    form: ProjectForm = field(default_factory=ProjectForm)
    selection: Selection = field(default_factory=Selection)
    applications: Tuple[Application, ...] = ()
    notification: Optional[Notification] = None

    @property
    def form_visible(self) -> bool:
        return self.selection.panel is Panel.FORM_OPEN


def project_card(project: Project) -> Card:
    return Card(title=project.project_name, description=project.project_description, project_id=project.id)


# --- reducers ---


def projects_loaded(state: BoardState, projects: Iterable[Project]) -> BoardState:
    return replace(state, cards=STATIC_CARDS + tuple(project_card(p) for p in projects))


def card_selected(state: BoardState, card: Card) -> BoardState:
    if not card.is_project:
        return replace(state, selection=Selection(), applications=())
    return replace(state, selection=Selection(Panel.PROJECT_SELECTED, card), applications=())


def form_opened(state: BoardState) -> BoardState:
    return replace(state, selection=Selection(Panel.FORM_OPEN), applications=())


def panel_closed(state: BoardState) -> BoardState:
    return replace(state, selection=Selection(), applications=())


def form_field_changed(state: BoardState, name: str, value: str) -> BoardState:
    if name not in FORM_FIELDS:
        raise KeyError(f"unknown form field: {name}")
    return replace(state, form=replace(state.form, **{name: value}))


def project_created(state: BoardState, project: Project) -> BoardState:
    return replace(
        state,
        cards=state.cards + (project_card(project),),
        form=ProjectForm(),
        selection=Selection(),
    )


def project_deleted(state: BoardState, project_id: str) -> BoardState:
    cards = tuple(c for c in state.cards if c.project_id != project_id)
    if state.selection.project_id == project_id:
        return replace(state, cards=cards, selection=Selection(), applications=())
    return replace(state, cards=cards)


def applications_loaded(
    state: BoardState, project_id: str, applications: Iterable[Application]
) -> BoardState:
    # a late response for a project that is no longer selected is dropped
    if state.selection.project_id != project_id:
        return state
    return replace(state, applications=tuple(applications))


def application_submitted(state: BoardState, application: Application) -> BoardState:
    if state.selection.project_id != application.project_id:
        return state
    return replace(state, applications=state.applications + (application,))


def application_reviewed(state: BoardState, updated: Application) -> BoardState:
    apps = tuple(
        a.model_copy(update={"status": updated.status}) if a.id == updated.id else a
        for a in state.applications
    )
    return replace(state, applications=apps)


def notified(state: BoardState, kind: str, message: str, now: float, ttl_s: float = 3.0) -> BoardState:
    return replace(state, notification=Notification(kind, message, now + ttl_s))


def expired(state: BoardState, now: float) -> BoardState:
    n = state.notification
    if n is not None and now >= n.expires_at:
        return replace(state, notification=None)
    return state
