from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from todolist.models.task import Task


class TestE2E:
    def test_complete_task_journey(self, client: TestClient):
        # 1. Creation
        r = client.post("/api/todos", json={"title": "Buy milk", "description": "2%"})
        assert r.status_code == 201
        assert r.json() == {"id": 1, "title": "Buy milk", "description": "2%"}

        # 2. Fetch by id
        r = client.get("/api/todos/1")
        assert r.status_code == 200
        assert r.json() == {"id": 1, "title": "Buy milk", "description": "2%"}

        # 3. Deletion
        r = client.delete("/api/todos/1")
        assert r.status_code == 204
        assert r.content == b""

        # 4. Gone
        r = client.get("/api/todos/1")
        assert r.status_code == 404
        assert r.json()["error"] == "Task not found"

    def test_list_is_most_recent_first(self, client: TestClient):
        a = client.post("/api/todos", json={"title": "A"}).json()
        b = client.post("/api/todos", json={"title": "B"}).json()

        r = client.get("/api/todos")
        assert r.status_code == 200
        tasks = r.json()
        assert [t["title"] for t in tasks] == ["B", "A"]
        assert [t["id"] for t in tasks] == [b["id"], a["id"]]

    def test_list_empty(self, client: TestClient):
        r = client.get("/api/todos")
        assert r.status_code == 200
        assert r.json() == []

    def test_update_changes_only_target(self, client: TestClient, db: Session):
        first = client.post("/api/todos", json={"title": "first", "description": "one"}).json()
        second = client.post("/api/todos", json={"title": "second", "description": "two"}).json()

        r = client.put(f"/api/todos/{first['id']}", json={"title": "first!", "description": "uno"})
        assert r.status_code == 200
        assert r.json() == {"id": first["id"], "title": "first!", "description": "uno"}

        r = client.get(f"/api/todos/{second['id']}")
        assert r.json() == second

        row = db.query(Task).filter(Task.id == first["id"]).first()
        assert row.title == "first!"
        assert row.description == "uno"

    def test_update_replaces_both_fields(self, client: TestClient):
        task = client.post("/api/todos", json={"title": "t", "description": "d"}).json()

        r = client.put(f"/api/todos/{task['id']}", json={"title": "t2"})
        assert r.status_code == 200
        assert r.json()["description"] is None

    def test_update_unknown_id_is_not_found(self, client: TestClient):
        r = client.put("/api/todos/999", json={"title": "ghost"})
        assert r.status_code == 404
        assert "error" in r.json()

    def test_delete_unknown_id_is_not_an_error(self, client: TestClient):
        r = client.delete("/api/todos/999")
        assert r.status_code == 204

    def test_ids_are_not_reused(self, client: TestClient):
        first = client.post("/api/todos", json={"title": "x"}).json()
        assert client.delete(f"/api/todos/{first['id']}").status_code == 204

        second = client.post("/api/todos", json={"title": "y"}).json()
        assert second["id"] > first["id"]


class TestValidation:
    def test_title_required(self, client: TestClient):
        r = client.post("/api/todos", json={"description": "no title"})
        assert r.status_code == 422

        # empty title
        r = client.post("/api/todos", json={"title": ""})
        assert r.status_code == 422

        # whitespace only
        r = client.post("/api/todos", json={"title": "   "})
        assert r.status_code == 422

        assert client.get("/api/todos").json() == []

    def test_title_is_stripped_and_description_optional(self, client: TestClient):
        r = client.post("/api/todos", json={"title": "  padded  "})
        assert r.status_code == 201
        assert r.json()["title"] == "padded"
        assert r.json()["description"] is None

    def test_update_requires_title(self, client: TestClient):
        task = client.post("/api/todos", json={"title": "keep"}).json()
        r = client.put(f"/api/todos/{task['id']}", json={"title": ""})
        assert r.status_code == 422
        assert client.get(f"/api/todos/{task['id']}").json()["title"] == "keep"

    def test_non_integer_id(self, client: TestClient):
        r = client.get("/api/todos/abc")
        assert r.status_code == 422

    def test_out_of_range_id(self, client: TestClient):
        huge = 2**64
        assert client.get(f"/api/todos/{huge}").status_code == 422
        assert client.put(f"/api/todos/{huge}", json={"title": "x"}).status_code == 422
        assert client.delete(f"/api/todos/{huge}").status_code == 422

        # ids start at 1
        assert client.get("/api/todos/0").status_code == 422
        assert client.get("/api/todos/-1").status_code == 422


class TestDatabaseFailures:
    def test_missing_table_is_reported_as_500(self, app, client: TestClient):
        app.state.database.drop_all()

        r = client.get("/api/todos")
        assert r.status_code == 500
        assert "todos" in r.json()["error"]

        r = client.post("/api/todos", json={"title": "lost"})
        assert r.status_code == 500
        assert "error" in r.json()

        r = client.get("/api/todos/1")
        assert r.status_code == 500

        r = client.put("/api/todos/1", json={"title": "x"})
        assert r.status_code == 500
        assert "todos" in r.json()["error"]

        r = client.delete("/api/todos/1")
        assert r.status_code == 500

    def test_cors_headers(self, client: TestClient):
        r = client.get("/api/todos", headers={"Origin": "http://localhost:5173"})
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == "*"

    def test_unexpected_error_is_logged_once(self, app, caplog):
        @app.get("/boom")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/boom")
        assert r.status_code == 500
        assert r.json() == {"error": "Internal server error"}

        records = [rec for rec in caplog.records if rec.name == "todolist.main"]
        assert len(records) == 1
        assert "kaboom" in records[0].getMessage()
        assert records[0].exc_info is None
