from __future__ import annotations
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base


Base = declarative_base()


def build_engine(database_url: str) -> Engine:
	connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
	return create_engine(database_url, connect_args=connect_args, future=True)


def build_session_factory(engine: Engine) -> sessionmaker:
	return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def init_db(engine: Engine) -> None:
	# Importing models registers the tables on Base.metadata
	from . import models  # noqa: F401
	Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
	db = request.app.state.session_factory()
	try:
		yield db
	finally:
		db.close()
