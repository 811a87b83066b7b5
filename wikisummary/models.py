# wikisummary/models.py
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SummaryResult(BaseModel):
    found: bool
    text: Optional[str] = None
    # "parse" when the body was unusable, "not_found" when it had no extract
    error: Optional[Literal["parse", "not_found"]] = None


class SurfaceIn(BaseModel):
    name: str = Field(..., min_length=1)
    text: str = ""
    point: Optional[int] = None
    read_only: bool = False


class SurfaceOut(BaseModel):
    name: str
    text: str
    point: int
    read_only: bool
    displayed: bool = False


class LookupOutcome(BaseModel):
    title: str
    url: str
    status: Literal["ok", "not_found", "fetch_failed", "parse_error"]
    message: str
    surface: Optional[str] = None
    text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
