from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class EditRecord(BaseModel):
    op: Literal["sub", "ins", "del"]
    source: Optional[str] = None
    target: Optional[str] = None
    position: int


class Match(BaseModel):
    distance: int
    keyword: str
    label: str
    fqdn: str
    edits: list[EditRecord] = Field(default_factory=list)


class FailedComparison(BaseModel):
    keyword: str
    label: str
    fqdn: str
    reason: str


class ScanResult(BaseModel):
    threshold: int
    keywords: int = 0
    fqdns_processed: int = 0
    comparisons: int = 0
    matches: list[Match] = Field(default_factory=list)
    failures: list[FailedComparison] = Field(default_factory=list)
