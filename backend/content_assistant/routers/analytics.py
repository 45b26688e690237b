from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import NotFoundError, StorageError
from ..models import Prompt

router = APIRouter(prefix="/api", tags=["analytics"])

logger = logging.getLogger(__name__)

RECENT_FEEDBACK_COUNT = 5


class FeedbackEntry(BaseModel):
	prompt: str
	rating: Optional[Union[int, float]] = None
	feedback: Optional[str] = None


class AnalyticsResponse(BaseModel):
	totalGenerated: int
	averageRating: str
	last5Feedbacks: List[FeedbackEntry]


def _rating_value(rating: Optional[float]) -> Optional[Union[int, float]]:
	# Whole-number ratings go back out as JSON integers
	if rating is not None and rating.is_integer():
		return int(rating)
	return rating


def summarize(prompts: List[Prompt]) -> Dict[str, Any]:
	"""Aggregate prompt rows, oldest first.

	Unrated rows count as a rating of 0, so they pull the average down
	instead of being left out. The average is rendered with two decimals.
	"""
	total = len(prompts)
	average = sum((p.rating or 0) for p in prompts) / total
	recent = prompts[-RECENT_FEEDBACK_COUNT:]
	return {
		"totalGenerated": total,
		"averageRating": f"{average:.2f}",
		"last5Feedbacks": [
			{"prompt": p.prompt, "rating": _rating_value(p.rating), "feedback": p.feedback}
			for p in recent
		],
	}


@router.get("/analytics/{org_name}", response_model=AnalyticsResponse)
def analytics(org_name: str, db: Session = Depends(get_db)):
	try:
		prompts = (
			db.query(Prompt)
			.filter(Prompt.org_name == org_name)
			.order_by(Prompt.id)
			.all()
		)
	except SQLAlchemyError as e:
		logger.warning("Analytics query failed for %r: %s", org_name, e)
		raise StorageError("Error fetching analytics")
	if not prompts:
		raise NotFoundError("No data found for this organization")
	return summarize(prompts)
