from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from .db import Base


class Organization(Base):
	__tablename__ = "organizations"
	id = Column(Integer, primary_key=True, autoincrement=True)
	# Natural key, intentionally not unique: repeated onboarding adds another row
	org_name = Column(String(256), nullable=False, index=True)
	brand_guide = Column(Text, nullable=False)
	goals = Column(Text, nullable=False)
	# Collected at onboarding; the generation template does not use it
	personas = Column(Text, nullable=False)
	style_preferences = Column(Text, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Prompt(Base):
	__tablename__ = "prompts"
	id = Column(Integer, primary_key=True, autoincrement=True)
	org_name = Column(String(256), nullable=False, index=True)
	prompt = Column(Text, nullable=False)
	content = Column(Text, nullable=True)
	# Unset until rated
	rating = Column(Float, nullable=True)
	feedback = Column(Text, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
