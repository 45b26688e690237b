import pytest

from content_assistant.db import Base
from content_assistant.models import Organization

from conftest import ACME


def test_root_returns_welcome_text(client):
	resp = client.get("/")
	assert resp.status_code == 200
	assert resp.text == "Welcome to AI Content Assistant API!"


def test_onboard_creates_organization(client, db):
	resp = client.post("/api/onboard", json=ACME)
	assert resp.status_code == 200
	assert resp.json() == {"message": "Organization onboarded successfully"}

	rows = db.query(Organization).all()
	assert len(rows) == 1
	org = rows[0]
	assert org.org_name == "Acme"
	assert org.brand_guide == "Friendly and direct"
	assert org.goals == "Grow newsletter signups"
	assert org.personas == "Busy founders"
	assert org.style_preferences == "Short sentences"


@pytest.mark.parametrize("field", ["orgName", "brandGuide", "goals", "personas", "stylePreferences"])
def test_onboard_missing_field_is_rejected(client, db, field):
	body = {k: v for k, v in ACME.items() if k != field}
	resp = client.post("/api/onboard", json=body)
	assert resp.status_code == 400
	assert resp.json() == {"error": "Missing required fields"}
	assert db.query(Organization).count() == 0


def test_onboard_empty_field_is_rejected(client, db):
	resp = client.post("/api/onboard", json={**ACME, "goals": ""})
	assert resp.status_code == 400
	assert db.query(Organization).count() == 0


def test_onboard_twice_stores_two_rows(client, db):
	client.post("/api/onboard", json=ACME)
	client.post("/api/onboard", json={**ACME, "goals": "Something else"})
	assert db.query(Organization).filter(Organization.org_name == "Acme").count() == 2


def test_onboard_malformed_body_is_bad_request(client):
	resp = client.post("/api/onboard", content="not json", headers={"Content-Type": "application/json"})
	assert resp.status_code == 400
	assert resp.json() == {"error": "Invalid request body"}


def test_onboard_storage_failure(app, client):
	Base.metadata.drop_all(bind=app.state.engine)
	resp = client.post("/api/onboard", json=ACME)
	assert resp.status_code == 500
	assert resp.json() == {"error": "Error saving organization"}
