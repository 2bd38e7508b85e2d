import os

from sqlalchemy.engine import URL

# Listen port is fixed; only the bind address can be overridden
PORT = 3000
HOST = os.environ.get("HOST", "127.0.0.1")

DB_PORT = 5432

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


def database_url() -> str:
    """Return the SQLAlchemy URL for the task store.

    DATABASE_URL wins when set (tests and local dev point it at SQLite).
    Otherwise the PostgreSQL URL is assembled from DB_HOST/DB_USER/DB_PASSWORD/DB_NAME,
    read at call-time so runtime overrides take effect.
    """
    url = os.environ.get("DATABASE_URL")
    if url:
        return url
    return URL.create(
        "postgresql+psycopg2",
        username=os.environ.get("DB_USER", "postgres"),
        password=os.environ.get("DB_PASSWORD", "todolist@123"),
        host=os.environ.get("DB_HOST", "localhost"),
        port=DB_PORT,
        database=os.environ.get("DB_NAME", "todolist"),
    ).render_as_string(hide_password=False)
