"""Contract tests for reference endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_abbreviations_returns_200(client: AsyncClient):
    response = await client.get("/api/references/abbreviations")

    assert response.status_code == 200
    data = response.json()
    assert {"abbreviation": "VIB", "meaning": "Veiligheidsinformatieblad"} in data


@pytest.mark.asyncio
async def test_get_legal_article_returns_200(client: AsyncClient):
    response = await client.get("/api/references/legal", params={"ref": "Art. 6.5"})

    assert response.status_code == 200
    data = response.json()
    assert data["ref"] == "Art. 6.5"
    assert data["title"]
    assert data["text"]


@pytest.mark.asyncio
async def test_get_unknown_legal_article_returns_404(client: AsyncClient):
    response = await client.get("/api/references/legal", params={"ref": "Art. 99"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_legal_article_requires_ref(client: AsyncClient):
    response = await client.get("/api/references/legal")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_abbreviation_returns_200(client: AsyncClient):
    response = await client.get("/api/references/abbreviations/PBM")

    assert response.status_code == 200
    assert response.json() == {
        "abbreviation": "PBM",
        "meaning": "Persoonlijke beschermingsmiddelen",
    }


@pytest.mark.asyncio
async def test_get_unknown_abbreviation_returns_404(client: AsyncClient):
    response = await client.get("/api/references/abbreviations/XYZ")

    assert response.status_code == 404
