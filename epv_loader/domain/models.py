"""
Domain models for the EPV loader.

Defines the synthetic record schema aligned with the `test_epv` table. Records
are created by the generator, passed through the progress logger and the CSV
encoder, and never mutated along the way.
"""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    Representation of a single row in the `test_epv` table.
    """

    first: str = Field("Test", description="First name literal.")
    last: str = Field(..., description="'User ' followed by the zero-based generation index.")
    amount: Decimal = Field(Decimal("200000"), description="Numeric amount.")
    date: str = Field(..., description="ISO-8601 timestamp taken at generation time.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


__all__ = ["Record"]
