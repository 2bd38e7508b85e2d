"""
Controller for the todo screen: runs the HTTP calls and dispatches actions.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from todolist.client.api import TodoClient
from todolist.client.state import (
    DescriptionChanged,
    EditCancelled,
    EditStarted,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ListToggled,
    SubmitSucceeded,
    TitleChanged,
    ViewState,
    reduce,
)
from todolist.schemas.task import TaskOut

logger = logging.getLogger(__name__)

# ValueError covers undecodable JSON and payloads that do not validate as a task
NETWORK_ERRORS = (httpx.HTTPError, ValueError)


class TodoView:
    """
    Form plus optional task list.

    With ``toggle_list=True`` the list starts hidden and is fetched on every
    hidden -> visible transition. ``confirm`` is asked before each delete.
    Failures are logged and leave the state as it was.
    """

    def __init__(
        self,
        client: TodoClient,
        *,
        toggle_list: bool = False,
        confirm: Optional[Callable[[TaskOut], bool]] = None,
    ) -> None:
        self.client = client
        self.confirm = confirm
        self.state = ViewState(list_visible=not toggle_list)

    def dispatch(self, action) -> ViewState:
        self.state = reduce(self.state, action)
        return self.state

    def mount(self) -> None:
        if self.state.list_visible:
            self.refresh()

    def refresh(self) -> None:
        self.dispatch(FetchStarted())
        try:
            todos = self.client.list()
        except NETWORK_ERRORS as exc:
            logger.error("Failed to fetch tasks: %s", exc)
            self.dispatch(FetchFailed())
            return
        self.dispatch(FetchSucceeded(tuple(todos)))

    def set_title(self, value: str) -> None:
        self.dispatch(TitleChanged(value))

    def set_description(self, value: str) -> None:
        self.dispatch(DescriptionChanged(value))

    def submit(self) -> bool:
        state = self.state
        # the title field is required on the form
        if not state.title.strip():
            logger.info("Submit ignored: title is required")
            return False

        try:
            if state.editing is not None:
                self.client.update(state.editing, state.title, state.description)
            else:
                self.client.create(state.title, state.description)
        except NETWORK_ERRORS as exc:
            logger.error("Failed to save task: %s", exc)
            return False

        self.dispatch(SubmitSucceeded())
        if self.state.list_visible:
            self.refresh()
        return True

    def start_edit(self, task: TaskOut) -> None:
        self.dispatch(EditStarted(task))

    def cancel_edit(self) -> None:
        self.dispatch(EditCancelled())

    def delete(self, task: TaskOut) -> bool:
        if self.confirm is not None and not self.confirm(task):
            return False
        try:
            self.client.delete(task.id)
        except NETWORK_ERRORS as exc:
            logger.error("Failed to delete task %s: %s", task.id, exc)
            return False
        self.refresh()
        return True

    def toggle_list(self) -> None:
        self.dispatch(ListToggled())
        if self.state.list_visible:
            self.refresh()

    def render(self) -> str:
        return render(self.state)


def render(state: ViewState) -> str:
    lines = [
        "Todo List",
        f"Title: {state.title}",
        f"Description: {state.description}",
        "[Save changes]" if state.mode == "edit" else "[Add task]",
    ]
    if state.mode == "edit":
        lines.append("[Cancel]")

    if not state.list_visible:
        return "\n".join(lines)
    if state.loading:
        lines.append("Loading...")
        return "\n".join(lines)

    for todo in state.todos:
        lines.append(f"#{todo.id} {todo.title}")
        if todo.description:
            lines.append(f"    {todo.description}")
    return "\n".join(lines)
