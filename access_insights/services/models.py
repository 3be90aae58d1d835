"""Shared service result types."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class EnrichmentResult(Generic[T]):
    """
    Outcome of a non-essential step (chart config, summary).

    Holds either the generated value or the designated fallback, never an
    exception, so callers can render it without special-casing errors.
    """

    value: T
    fallback: bool = False
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "EnrichmentResult[T]":
        return cls(value=value)

    @classmethod
    def degraded(cls, value: T, error: str | None = None) -> "EnrichmentResult[T]":
        return cls(value=value, fallback=True, error=error)
