import pytest
from fastapi.testclient import TestClient

from content_assistant.main import create_app
from content_assistant.openai_client import get_openai_client
from content_assistant.settings import Settings


class FakeOpenAI:
	def __init__(self, content="Generated copy", error=None):
		self.content = content
		self.error = error
		self.calls = []

	async def complete(self, system, user):
		self.calls.append({"system": system, "user": user})
		if self.error is not None:
			raise self.error
		return self.content


@pytest.fixture
def settings(tmp_path):
	return Settings(
		database_url=f"sqlite:///{tmp_path / 'content.db'}",
		openai_api_key="test-key",
		log_level="WARNING",
	)


@pytest.fixture
def fake_openai():
	return FakeOpenAI()


@pytest.fixture
def app(settings, fake_openai):
	application = create_app(settings)
	application.dependency_overrides[get_openai_client] = lambda: fake_openai
	return application


@pytest.fixture
def client(app):
	with TestClient(app) as c:
		yield c


@pytest.fixture
def db(app, client):
	session = app.state.session_factory()
	try:
		yield session
	finally:
		session.close()


ACME = {
	"orgName": "Acme",
	"brandGuide": "Friendly and direct",
	"goals": "Grow newsletter signups",
	"personas": "Busy founders",
	"stylePreferences": "Short sentences",
}


@pytest.fixture
def onboarded(client):
	resp = client.post("/api/onboard", json=ACME)
	assert resp.status_code == 200
	return ACME
