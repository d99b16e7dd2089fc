"""API routes for legal article and abbreviation lookups."""

from fastapi import APIRouter, HTTPException, Query, status

from ohshub.core.references import ABBREVIATIONS, lookup_abbreviation, lookup_article
from ohshub.schemas.references import AbbreviationResponse, LegalArticleResponse

router = APIRouter()


@router.get(
    "/abbreviations",
    response_model=list[AbbreviationResponse],
    summary="List abbreviations",
)
async def list_abbreviations() -> list[AbbreviationResponse]:
    return [
        AbbreviationResponse(abbreviation=abbreviation, meaning=meaning)
        for abbreviation, meaning in ABBREVIATIONS.items()
    ]


@router.get(
    "/abbreviations/{abbreviation}",
    response_model=AbbreviationResponse,
    summary="Look up an abbreviation",
)
async def get_abbreviation(abbreviation: str) -> AbbreviationResponse:
    """Meaning of one abbreviation; matching is case-sensitive (``PBM``, ``HOVd``)."""
    meaning = lookup_abbreviation(abbreviation)
    if meaning is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Abbreviation not found",
        )
    return AbbreviationResponse(abbreviation=abbreviation, meaning=meaning)


@router.get(
    "/legal",
    response_model=LegalArticleResponse,
    summary="Look up a legal article",
)
async def get_legal_article(
    ref: str = Query(..., min_length=1, max_length=100),
) -> LegalArticleResponse:
    """Get a legal article by citation id, e.g. ``Art. 6.5``."""
    article = lookup_article(ref)
    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Legal article not found",
        )
    return LegalArticleResponse(ref=article.ref, title=article.title, text=article.text)
