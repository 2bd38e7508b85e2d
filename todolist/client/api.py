"""
HTTP client for the todos API.
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from todolist.schemas.task import TaskOut

DEFAULT_BASE_URL = "http://localhost:3000"


class TodoClient:
    """
    One method per API operation. Non-2xx answers raise ``httpx.HTTPStatusError``.

    Pass ``http`` to reuse an existing ``httpx.Client`` (a FastAPI ``TestClient`` works too).
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, http: Optional[httpx.Client] = None):
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=None)

    def list(self) -> List[TaskOut]:
        resp = self.http.get("/api/todos")
        resp.raise_for_status()
        return [TaskOut.model_validate(item) for item in resp.json()]

    def get(self, task_id: int) -> TaskOut:
        resp = self.http.get(f"/api/todos/{task_id}")
        resp.raise_for_status()
        return TaskOut.model_validate(resp.json())

    def create(self, title: str, description: Optional[str] = None) -> TaskOut:
        resp = self.http.post("/api/todos", json={"title": title, "description": description})
        resp.raise_for_status()
        return TaskOut.model_validate(resp.json())

    def update(self, task_id: int, title: str, description: Optional[str] = None) -> TaskOut:
        resp = self.http.put(f"/api/todos/{task_id}", json={"title": title, "description": description})
        resp.raise_for_status()
        return TaskOut.model_validate(resp.json())

    def delete(self, task_id: int) -> None:
        resp = self.http.delete(f"/api/todos/{task_id}")
        resp.raise_for_status()

    def close(self) -> None:
        self.http.close()
