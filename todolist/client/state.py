"""
View state of the todo screen and the reducer that drives it.

The screen is either in create mode or in edit mode, depending only on
whether ``editing`` holds a task id. ``reduce`` never mutates its input
and performs no I/O; the controller in ``todolist.client.view`` owns the
HTTP calls and feeds their outcome back in as actions.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from todolist.schemas.task import TaskOut


@dataclass(frozen=True)
class ViewState:
    todos: Tuple[TaskOut, ...] = ()
    title: str = ""
    description: str = ""
    editing: Optional[int] = None
    list_visible: bool = True
    loading: bool = False

    @property
    def mode(self) -> str:
        return "create" if self.editing is None else "edit"


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    todos: Tuple[TaskOut, ...]


@dataclass(frozen=True)
class FetchFailed:
    pass


@dataclass(frozen=True)
class TitleChanged:
    value: str


@dataclass(frozen=True)
class DescriptionChanged:
    value: str


@dataclass(frozen=True)
class EditStarted:
    task: TaskOut


@dataclass(frozen=True)
class EditCancelled:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    pass


@dataclass(frozen=True)
class ListToggled:
    pass


def _cleared_form(state: ViewState) -> ViewState:
    return replace(state, title="", description="", editing=None)


def reduce(state: ViewState, action) -> ViewState:
    if isinstance(action, FetchStarted):
        return replace(state, loading=True)
    if isinstance(action, FetchSucceeded):
        return replace(state, todos=tuple(action.todos), loading=False)
    if isinstance(action, FetchFailed):
        return replace(state, loading=False)
    if isinstance(action, TitleChanged):
        return replace(state, title=action.value)
    if isinstance(action, DescriptionChanged):
        return replace(state, description=action.value)
    if isinstance(action, EditStarted):
        task = action.task
        return replace(state, title=task.title, description=task.description or "", editing=task.id)
    if isinstance(action, (EditCancelled, SubmitSucceeded)):
        return _cleared_form(state)
    if isinstance(action, ListToggled):
        return replace(state, list_visible=not state.list_visible)
    raise TypeError(f"unknown action: {action!r}")
