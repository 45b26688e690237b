from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import StorageError, ValidationError
from ..models import Organization

router = APIRouter(prefix="/api", tags=["onboarding"])

logger = logging.getLogger(__name__)


class OnboardRequest(BaseModel):
	orgName: Optional[str] = None
	brandGuide: Optional[str] = None
	goals: Optional[str] = None
	personas: Optional[str] = None
	stylePreferences: Optional[str] = None


@router.post("/onboard")
def onboard(req: OnboardRequest, db: Session = Depends(get_db)):
	if not (req.orgName and req.brandGuide and req.goals and req.personas and req.stylePreferences):
		raise ValidationError("Missing required fields")
	# No duplicate check: onboarding the same orgName twice stores a second row
	try:
		row = Organization(
			org_name=req.orgName,
			brand_guide=req.brandGuide,
			goals=req.goals,
			personas=req.personas,
			style_preferences=req.stylePreferences,
		)
		db.add(row)
		db.commit()
	except SQLAlchemyError as e:
		db.rollback()
		logger.warning("Failed to save organization %r: %s", req.orgName, e)
		raise StorageError("Error saving organization")
	return {"message": "Organization onboarded successfully"}
