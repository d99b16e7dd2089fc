"""Integration tests for a full wizard session over the API.

The client carries answers and position between requests, the way a
browser frontend does.
"""

import pytest
from httpx import AsyncClient

THEME_URL = "/api/themes/hazardous-substances"

STEP1 = {"haz1-sector": "manufacturing", "haz1-workers": "2-10", "haz1-rie": "partial"}
STEP2 = {"haz2-sds": "yes", "haz2-categories": ["cmr-1a", "irritant"], "haz2-substitution": "no"}
STEP5 = {"haz5-closed-system": "no", "haz5-register": "no", "haz5-medical": "yes"}


async def _navigate(client: AsyncClient, state: dict, action: str, **extra) -> dict:
    payload = {
        "answers": state.get("answers", {}),
        "current_step": state.get("current_step"),
        "at_review": state.get("at_review", False),
        "action": action,
        **extra,
    }
    response = await client.post(f"{THEME_URL}/navigation", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_cmr_branch_opens_and_closes(client: AsyncClient):
    """Selecting a CMR category reveals step 5; deselecting hides it again."""
    state = await _navigate(client, {}, "start")
    assert state["current_step"] == "haz-step1-workplace"
    assert "haz-step5-cmr" not in state["visible_steps"]
    assert len(state["visible_steps"]) == 5
    assert state["progress"] == 0

    state = await _navigate(client, state, "next", updates=STEP1)
    assert state["current_step"] == "haz-step2-substances"
    assert state["progress"] == 20

    state = await _navigate(client, state, "next", updates=STEP2)
    assert state["current_step"] == "haz-step3-exposure"
    assert "haz-step5-cmr" in state["visible_steps"]
    assert len(state["visible_steps"]) == 6
    assert state["progress"] == 33

    state = await _navigate(client, state, "goto", target_step="haz-step5-cmr")
    assert state["current_step"] == "haz-step5-cmr"
    assert state["visible_questions"] == ["haz5-closed-system", "haz5-register", "haz5-medical"]
    assert state["missing_required"] == ["haz5-closed-system", "haz5-register", "haz5-medical"]

    state = await _navigate(client, state, "next", updates=STEP5)
    assert state["current_step"] == "haz-step6-documentation"
    assert state["answers"]["haz5-register"] == "no"

    # Dropping the CMR category while positioned on step 5
    state["current_step"] = "haz-step5-cmr"
    state = await _navigate(
        client,
        state,
        "next",
        updates={"haz2-categories": ["irritant"]},
    )
    assert "haz-step5-cmr" not in state["visible_steps"]
    assert state["current_step"] == "haz-step6-documentation"
    # Hidden answers are kept
    assert state["answers"]["haz5-closed-system"] == "no"


@pytest.mark.asyncio
async def test_require_complete_blocks_next(client: AsyncClient):
    state = await _navigate(client, {}, "start")

    blocked = await _navigate(client, state, "next", require_complete=True)
    assert blocked["moved"] is False
    assert blocked["current_step"] == "haz-step1-workplace"
    assert blocked["missing_required"] == ["haz1-sector", "haz1-workers", "haz1-rie"]

    moved = await _navigate(client, state, "next", updates=STEP1, require_complete=True)
    assert moved["moved"] is True
    assert moved["current_step"] == "haz-step2-substances"


@pytest.mark.asyncio
async def test_review_lists_all_missing_answers(client: AsyncClient):
    state = {"answers": {**STEP1}, "current_step": "haz-step6-documentation"}

    state = await _navigate(client, state, "next")
    assert state["at_review"] is True
    assert state["current_step"] is None
    assert state["progress"] == 100
    assert "haz2-sds" in state["missing_required"]
    assert "haz6-action-plan" in state["missing_required"]
    assert "haz1-rie" not in state["missing_required"]

    state = await _navigate(client, state, "previous")
    assert state["at_review"] is False
    assert state["current_step"] == "haz-step6-documentation"


@pytest.mark.asyncio
async def test_reset_discards_answers(client: AsyncClient):
    state = {"answers": {**STEP1, **STEP2}, "current_step": "haz-step3-exposure"}

    state = await _navigate(client, state, "reset")

    assert state["answers"] == {}
    assert state["current_step"] == "haz-step1-workplace"


@pytest.mark.asyncio
async def test_unknown_position_restarts(client: AsyncClient):
    state = await _navigate(client, {"current_step": "removed-step"}, "next")

    # Restarted on the first step, then advanced once
    assert state["current_step"] == "haz-step2-substances"


@pytest.mark.asyncio
async def test_assessment_and_summary_after_cmr_flow(client: AsyncClient):
    answers = {**STEP1, **STEP2, **STEP5}

    response = await client.post(f"{THEME_URL}/assessment", json={"answers": answers})
    assert response.status_code == 200
    verdict = response.json()
    assert verdict["overall_level"] == "critical"
    topics = [f["topic"] for f in verdict["findings"]]
    assert "CMR — Gesloten systeem" in topics
    assert "CMR — Blootstellingsregister" in topics
    priorities = [r["priority"] for r in verdict["recommendations"]]
    assert priorities == sorted(priorities)

    response = await client.post(f"{THEME_URL}/summary", json={"answers": answers})
    assert response.status_code == 200
    text = response.json()["text"]
    assert "CMR-aanvullende maatregelen" in text
    assert "Totaal risiconiveau: Kritiek" in text


@pytest.mark.asyncio
async def test_hidden_cmr_answers_do_not_raise_level(client: AsyncClient):
    """Stale step-5 answers are ignored once no CMR category is selected."""
    answers = {**STEP1, **STEP2, **STEP5, "haz2-categories": ["irritant"]}

    response = await client.post(f"{THEME_URL}/assessment", json={"answers": answers})
    assert response.status_code == 200
    verdict = response.json()
    assert verdict["overall_level"] != "critical"
    assert not any(f["topic"].startswith("CMR") for f in verdict["findings"])

    response = await client.post(f"{THEME_URL}/summary", json={"answers": answers})
    assert "CMR-aanvullende maatregelen" not in response.json()["text"]
