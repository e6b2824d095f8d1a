"""Canonical model — friendship pairs, load stats, config, query result."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_INPUT_FILE = "input.txt"

NO_RELATION = -1


class Friendship(BaseModel):
    a: str
    b: str


class LoadStats(BaseModel):
    total: int
    loaded: int
    skipped: int


class FriendshipLoad(BaseModel):
    """Returned by friendship_reader.read_friendships(). Contains only parsed pairs."""

    friendships: list[Friendship]
    stats: LoadStats


class SeparationConfig(BaseModel):
    input_file: Path = Path(DEFAULT_INPUT_FILE)
    encoding: str = "utf-8"
    bidirectional: bool = True


class SeparationResult(BaseModel):
    origin: str
    target: str
    degrees: int
    path: list[str] = Field(default_factory=list)

    @property
    def related(self) -> bool:
        return self.degrees != NO_RELATION
