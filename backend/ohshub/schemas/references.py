"""Pydantic schemas for reference table endpoints."""

from pydantic import BaseModel


class LegalArticleResponse(BaseModel):
    ref: str
    title: str
    text: str


class AbbreviationResponse(BaseModel):
    abbreviation: str
    meaning: str
