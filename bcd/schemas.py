"""Data schemas for session exports.

Pydantic models for the "download session" payload. Field names are the
camelCase keys the dashboard has always written, so older exports load
unchanged.

Example export (abridged):
{
  "cognitiveState": {"attention": 71.2, "cognitiveLoad": 48.9, ...},
  "modalities": [{"name": "Facial Micro-expressions", "active": true, ...}],
  "personality": [{"trait": "Openness", "score": 81}, ...],
  "timeline": [{"time": "T+13s", "attention": 71.2, "stress": 38.4}, ...],
  "reactivity": [{"time": "T+13s", "reactivity": 70.3}, ...],
  "fingerprint": [{"trait": "Foresight", "score": 70, "drift": 42}, ...],
  "modeDistribution": [{"mode": "Rational", "score": 24, "ci": [20, 28]}, ...],
  "systemMetrics": {"streams": 4, "latency": 71, "accuracy": 95.1},
  "exportedAt": "2026-10-19T09:30:00.123000Z"
}
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field, field_serializer

Percent = Annotated[float, Field(ge=0.0, le=100.0)]


class ModalityRecord(BaseModel):
    """One configured input stream."""

    name: str = ""
    description: str = ""
    active: bool = True
    confidence: float = 0.0
    id: str


class CognitiveStateRecord(BaseModel):
    attention: Percent
    cognitiveLoad: Percent
    emotionalValence: Percent
    stress: Percent
    engagement: Percent
    deceptionRisk: Percent


class TraitScoreRecord(BaseModel):
    trait: str
    score: int = Field(ge=0, le=100)


class FingerprintRecord(BaseModel):
    trait: str
    score: int = Field(ge=0, le=100)
    drift: int


class ModeScoreRecord(BaseModel):
    mode: str
    score: int = Field(ge=0, le=100)
    ci: List[int] = Field(min_length=2, max_length=2)


class TimelineRecord(BaseModel):
    time: str
    attention: Percent
    stress: Percent


class ReactivityRecord(BaseModel):
    time: str
    reactivity: Percent


class SystemMetricsRecord(BaseModel):
    streams: int = Field(ge=1)
    latency: int
    accuracy: float = Field(ge=88.0, le=98.0)


class SessionExport(BaseModel):
    """Complete session snapshot as written by the export action."""

    cognitiveState: CognitiveStateRecord
    modalities: List[ModalityRecord] = Field(default_factory=list)
    personality: List[TraitScoreRecord] = Field(default_factory=list)
    timeline: List[TimelineRecord] = Field(default_factory=list)
    reactivity: List[ReactivityRecord] = Field(default_factory=list)
    fingerprint: List[FingerprintRecord] = Field(default_factory=list)
    modeDistribution: List[ModeScoreRecord] = Field(default_factory=list)
    systemMetrics: SystemMetricsRecord
    exportedAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_serializer("exportedAt")
    def _iso_millis(self, value: datetime) -> str:
        # toISOString form: UTC, millisecond precision, Z suffix
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent)

    def save(self, path: Union[str, Path]) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.to_json(), encoding="utf-8")
        return out

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SessionExport":
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


__all__ = [
    "ModalityRecord",
    "CognitiveStateRecord",
    "TraitScoreRecord",
    "FingerprintRecord",
    "ModeScoreRecord",
    "TimelineRecord",
    "ReactivityRecord",
    "SystemMetricsRecord",
    "SessionExport",
]
