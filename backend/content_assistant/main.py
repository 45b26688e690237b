from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from .db import build_engine, build_session_factory, init_db
from .errors import register_error_handlers
from .logging_config import configure_logging
from .openai_client import OpenAIClient
from .settings import Settings, settings
from .routers import onboard, generate, rate, analytics

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
	config = app_settings or settings
	configure_logging(config.log_level)

	app = FastAPI(title="AI Content Assistant API")
	app.state.settings = config
	app.state.openai_client = None

	app.add_middleware(
		CORSMiddleware,
		allow_origins=config.cors_origins,
		allow_methods=["*"],
		allow_headers=["*"],
	)
	register_error_handlers(app)

	app.include_router(onboard.router)
	app.include_router(generate.router)
	app.include_router(rate.router)
	app.include_router(analytics.router)

	@app.get("/", response_class=PlainTextResponse)
	def welcome():
		return "Welcome to AI Content Assistant API!"

	@app.get("/info")
	def info(request: Request):
		return {"status": "ok", "openai_configured": request.app.state.openai_client is not None}

	@app.on_event("startup")
	async def startup_event():
		engine = build_engine(config.database_url)
		app.state.engine = engine
		app.state.session_factory = build_session_factory(engine)
		# Keep serving when the database is down; requests then fail at the store
		try:
			init_db(engine)
			logger.info("Database connected")
		except SQLAlchemyError as e:
			logger.error("Database connection error: %s", e)
		try:
			app.state.openai_client = OpenAIClient(config=config)
		except ValueError as e:
			logger.warning("Content generation disabled: %s", e)

	@app.on_event("shutdown")
	async def shutdown_event():
		if app.state.openai_client is not None:
			await app.state.openai_client.aclose()
			app.state.openai_client = None
		app.state.engine.dispose()

	return app


app = create_app()


if __name__ == "__main__":
	import uvicorn

	logger.info("AI Content Assistant backend running on http://localhost:%s", settings.port)
	uvicorn.run(app, host=settings.host, port=settings.port)
