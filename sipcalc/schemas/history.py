"""Pydantic schema for stored projection history."""

from pydantic import BaseModel, ConfigDict


class HistoryEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    date: str
    totalInvested: int
    totalValue: int
    result: str
