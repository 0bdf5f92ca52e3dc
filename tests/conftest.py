import json
import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campaign_studio.api.deps import get_llm_service
from campaign_studio.core.database import Base, get_db
from campaign_studio.main import app
from campaign_studio.models import Audience, BrandGuide, Campaign, User

EMAIL_REPLY = {
    "subjectLine": "Your spring refresh starts here",
    "preheader": "New arrivals picked for you",
    "headline": "Fresh looks for longer days",
    "bodyCopy": "Spring is here and so is our new collection.",
    "ctaText": "Shop the drop",
}

META_REPLY = {
    "primaryText": "Brighten your feed with our spring line.",
    "headline": "Spring is here",
    "description": "Free shipping this week only.",
    "ctaButton": "Shop Now",
}


class StubLLM:
    """
    Stands in for the text-generation endpoint. Replies with valid JSON for
    the channel named in the prompt; calls listed in `fail_calls` (1-based)
    raise instead.
    """

    def __init__(self, fail_calls=(), reply=None):
        self.fail_calls = set(fail_calls)
        self.reply = reply
        self.prompts = []

    def complete(self, prompt, max_tokens=None):
        self.prompts.append(prompt)
        if len(self.prompts) in self.fail_calls:
            raise RuntimeError("upstream unavailable")
        if self.reply is not None:
            return self.reply
        payload = EMAIL_REPLY if "creating email content" in prompt else META_REPLY
        return f"Here you go:\n```json\n{json.dumps(payload)}\n```"


# ---------------------------------------------------------
# DATABASE
# ---------------------------------------------------------
@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


# ---------------------------------------------------------
# API CLIENT
# ---------------------------------------------------------
@pytest.fixture
def llm():
    return StubLLM()


@pytest.fixture
def client(session_factory, llm):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_service] = lambda: llm
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    def _register(email="owner@example.com", password="s3cret-pass", name="Owner"):
        response = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
        assert response.status_code == 201, response.text
        token = response.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
def headers(register):
    return register()


@pytest.fixture
def brand(client, headers):
    response = client.post(
        "/api/brand",
        json={
            "company_name": "Bloom & Co",
            "industry": "Retail",
            "voice_attributes": ["warm", "playful"],
            "primary_colors": ["#FF6600", "#fff"],
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["brand_guide"]


@pytest.fixture
def make_audience(client, headers):
    def _make(name="Young Professionals", **fields):
        body = {"name": name, "interests": ["fashion"], "pain_points": ["no time"], **fields}
        response = client.post("/api/audiences", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["audience"]

    return _make


@pytest.fixture
def make_campaign(client, headers, brand):
    def _make(audience_ids, channels=("email", "meta_ads"), **fields):
        body = {
            "name": "Spring Launch",
            "objective": "Drive first purchases",
            "segments": [{"audience_id": a} for a in audience_ids],
            "channels": [{"type": c} for c in channels],
            "key_messages": ["New collection"],
            "call_to_action": "Shop now",
            **fields,
        }
        response = client.post("/api/campaigns", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["campaign"]

    return _make


# ---------------------------------------------------------
# ORM FACTORIES (service-level tests)
# ---------------------------------------------------------
@pytest.fixture
def seed(db):
    """Builds a user with a brand guide, audiences and a draft campaign directly in the session."""

    def _seed(audience_names=("Students", "Parents"), channels=None, segment_instructions=None):
        user = User(email="seed@example.com", password_hash="x", name="Seed")
        db.add(user)
        db.flush()

        guide = BrandGuide(user_id=user.id, company_name="Bloom & Co", voice_attributes=["warm"])
        db.add(guide)

        audiences = [Audience(user_id=user.id, name=name, interests=["music"]) for name in audience_names]
        db.add_all(audiences)
        db.flush()

        segments = [{"audience_id": a.id, "custom_instructions": segment_instructions} for a in audiences]
        campaign = Campaign(
            user_id=user.id,
            brand_guide_id=guide.id,
            name="Back to School",
            objective="Grow signups",
            segments=segments,
            channels=channels if channels is not None else [
                {"type": "email", "enabled": True},
                {"type": "meta_ads", "enabled": True},
            ],
            key_messages=["Save 20%"],
            call_to_action="Sign up",
        )
        db.add(campaign)
        db.commit()
        return campaign

    return _seed
