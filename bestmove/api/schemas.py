from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class MoveRequest(BaseModel):
    fen: str = Field(..., min_length=1)


class MoveResponse(BaseModel):
    fen: str
    move: Optional[str]
    status: str


class EngineInfoResponse(BaseModel):
    path: str
