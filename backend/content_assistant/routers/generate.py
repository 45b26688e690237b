from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import GenerationError, NotFoundError, ValidationError
from ..models import Organization, Prompt
from ..openai_client import OpenAIClient, OpenAIError, get_openai_client

router = APIRouter(prefix="/api", tags=["generation"])

logger = logging.getLogger(__name__)


class GenerateRequest(BaseModel):
	orgName: Optional[str] = None
	prompt: Optional[str] = None


class GenerateResponse(BaseModel):
	content: str
	promptId: int


def build_system_prompt(org: Organization) -> str:
	# personas is not part of the template
	return (
		"You are a content strategist. Use the following brand details to generate helpful marketing content.\n\n"
		f"Brand Guide: {org.brand_guide}\n"
		f"Goals: {org.goals}\n"
		f"Style: {org.style_preferences}"
	)


@router.post("/generate", response_model=GenerateResponse)
async def generate(
	req: GenerateRequest,
	db: Session = Depends(get_db),
	client: Optional[OpenAIClient] = Depends(get_openai_client),
):
	if not req.orgName or not req.prompt:
		raise ValidationError("orgName and prompt are required")
	try:
		# Earliest row wins when an organization was onboarded more than once
		org = (
			db.query(Organization)
			.filter(Organization.org_name == req.orgName)
			.order_by(Organization.id)
			.first()
		)
	except SQLAlchemyError as e:
		logger.warning("Organization lookup failed for %r: %s", req.orgName, e)
		raise GenerationError("Error generating content")
	if org is None:
		raise NotFoundError("Organization not found")
	if client is None:
		logger.error("OpenAI error: client is not configured, set OPENAI_API_KEY")
		raise GenerationError("Error generating content")

	try:
		content = await client.complete(build_system_prompt(org), req.prompt)
	except OpenAIError as e:
		logger.error("OpenAI error: %s (status=%s, detail=%r)", e, e.status_code, e.detail)
		raise GenerationError("Error generating content")

	try:
		row = Prompt(org_name=req.orgName, prompt=req.prompt, content=content)
		db.add(row)
		db.commit()
		db.refresh(row)
	except SQLAlchemyError as e:
		db.rollback()
		logger.error("Failed to store generated content for %r: %s", req.orgName, e)
		raise GenerationError("Error generating content")
	return GenerateResponse(content=content, promptId=row.id)
