from __future__ import annotations
import logging
import math
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import NotFoundError, StorageError, ValidationError
from ..models import Prompt

router = APIRouter(prefix="/api", tags=["rating"])

logger = logging.getLogger(__name__)


class RateRequest(BaseModel):
	orgName: Optional[str] = None
	prompt: Optional[str] = None
	# Left untyped so non-numeric values reach the handler's check instead of being coerced
	rating: Any = None
	feedback: Optional[str] = None
	promptId: Optional[int] = None


def _parse_rating(value: Any) -> Optional[float]:
	"""Return the rating as a finite float, or None when it is not a usable JSON number."""
	if not isinstance(value, (int, float)) or isinstance(value, bool):
		return None
	try:
		rating = float(value)
	except OverflowError:
		return None
	# The JSON parser lets NaN and Infinity through
	if not math.isfinite(rating):
		return None
	return rating


@router.post("/rate")
def rate(req: RateRequest, db: Session = Depends(get_db)):
	rating = _parse_rating(req.rating)
	if not req.orgName or not req.prompt or rating is None:
		raise ValidationError("Missing required fields or invalid rating")
	try:
		query = db.query(Prompt).filter(Prompt.org_name == req.orgName, Prompt.prompt == req.prompt)
		if req.promptId is not None:
			query = query.filter(Prompt.id == req.promptId)
		entry = query.order_by(Prompt.id).first()
	except SQLAlchemyError as e:
		logger.warning("Prompt lookup failed for %r: %s", req.orgName, e)
		raise StorageError("Error saving feedback")
	if entry is None:
		raise NotFoundError("Prompt not found for this organization")

	# Last write wins; earlier ratings are not kept
	try:
		entry.rating = rating
		entry.feedback = req.feedback
		db.add(entry)
		db.commit()
	except SQLAlchemyError as e:
		db.rollback()
		logger.warning("Failed to save feedback for prompt %s: %s", entry.id, e)
		raise StorageError("Error saving feedback")
	return {"message": "Feedback recorded"}
