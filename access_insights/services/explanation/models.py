"""Explanation service models."""

from pydantic import AliasChoices, BaseModel, Field


class QueryExplanation(BaseModel):
    """One fragment of a SQL statement and what it does."""

    text: str = Field(validation_alias=AliasChoices("text", "section"))
    explanation: str = ""


class QueryExplanations(BaseModel):
    """Structured response requested from the explanation model."""

    sections: list[QueryExplanation]
