"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ohshub.core.config import get_settings
from ohshub.core.enums import QuestionType
from ohshub.main import app
from ohshub.schemas.wizard import answer_in, build_steps, includes


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the ASGI app.

    Yields:
        AsyncClient configured for testing
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def production_settings(monkeypatch: pytest.MonkeyPatch):
    """Switch the cached settings to production for one test."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("METRICS_TOKEN", "test-metrics-token")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture()
def branching_steps():
    """Four-step wizard where step 'details' depends on the first answer.

    - intro: has-hazard (single choice, yes/no), notes (free text)
    - details: shown only when has-hazard == yes; kinds (multi choice)
    - extra: shown only when kinds includes 'noise'
    - kinds-other (in details): required, shown only when kinds includes 'other'
    - closing: always visible
    """
    return build_steps(
        [
            {
                "id": "intro",
                "title": "Intro",
                "description": "Introductie",
                "questions": [
                    {
                        "id": "has-hazard",
                        "label": "Is er een gevaar?",
                        "type": QuestionType.SINGLE_CHOICE,
                        "options": [
                            {"value": "yes", "label": "Ja"},
                            {"value": "no", "label": "Nee"},
                        ],
                    },
                    {
                        "id": "notes",
                        "label": "Toelichting",
                        "type": QuestionType.FREE_TEXT,
                    },
                ],
            },
            {
                "id": "details",
                "title": "Details",
                "description": "Details van het gevaar",
                "visible_when": answer_in("has-hazard", "yes"),
                "questions": [
                    {
                        "id": "kinds",
                        "label": "Welke soorten?",
                        "type": QuestionType.MULTI_CHOICE,
                        "options": [
                            {"value": "dust", "label": "Stof"},
                            {"value": "noise", "label": "Lawaai"},
                            {"value": "other", "label": "Anders"},
                        ],
                    },
                    {
                        "id": "kinds-other",
                        "label": "Welk ander gevaar?",
                        "type": QuestionType.FREE_TEXT,
                        "required": True,
                        "visible_when": includes("kinds", "other"),
                    },
                ],
            },
            {
                "id": "extra",
                "title": "Extra",
                "description": "Aanvullend",
                "visible_when": includes("kinds", "noise"),
                "questions": [
                    {
                        "id": "hearing-protection",
                        "label": "Gehoorbescherming?",
                        "type": QuestionType.SINGLE_CHOICE,
                        "options": [
                            {"value": "yes", "label": "Ja"},
                            {"value": "no", "label": "Nee"},
                        ],
                    },
                ],
            },
            {
                "id": "closing",
                "title": "Afronding",
                "description": "Afronding",
                "questions": [
                    {
                        "id": "remarks",
                        "label": "Opmerkingen",
                        "type": QuestionType.FREE_TEXT,
                    },
                ],
            },
        ]
    )
