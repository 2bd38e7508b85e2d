import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist import config
from todolist.database import Database
from todolist.logging_setup import setup_logging
from todolist.routers import todos

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	database = app.state.database
	database.create_all()
	try:
		yield
	finally:
		database.dispose()


def create_app(database_url: Optional[str] = None) -> FastAPI:
	app = FastAPI(title="Todo List", lifespan=lifespan)
	app.state.database = Database(database_url or config.database_url())

	# The UI is served from another origin during development
	app.add_middleware(
		CORSMiddleware,
		allow_origins=config.CORS_ORIGINS,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	app.include_router(todos.router)

	@app.exception_handler(StarletteHTTPException)
	async def http_exception_handler(request, exc):
		return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

	# Data-layer failures reach the caller as a 500 carrying the driver's message
	@app.exception_handler(SQLAlchemyError)
	async def database_exception_handler(request, exc):
		message = str(getattr(exc, "orig", None) or exc)
		logger.error("Database error on %s %s: %s", request.method, request.url.path, message)
		return JSONResponse(status_code=500, content={"error": message})

	@app.exception_handler(Exception)
	async def generic_exception_handler(request, exc):
		# the server logs the traceback when Starlette re-raises
		logger.error("Unhandled error on %s %s: %r", request.method, request.url.path, exc)
		return JSONResponse(status_code=500, content={"error": "Internal server error"})

	return app


app = create_app()


def run():
	import uvicorn

	setup_logging(config.LOG_LEVEL)
	uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
	run()
