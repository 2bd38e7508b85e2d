import sys
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from todolist.main import create_app
from todolist.client.api import TodoClient
from todolist.client.view import TodoView

app = create_app("sqlite:///./quick_post.db")

with TestClient(app) as http:
    view = TodoView(TodoClient(http=http))
    view.mount()
    view.set_title("Buy milk")
    view.set_description("2%")
    print('saved', view.submit())
    print(view.render())
