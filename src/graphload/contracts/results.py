"""Stage outcomes, ingest counts and the final pipeline report.

These types answer: "What did the load produce?"

IMPORTANT:
- StageResult and PipelineReport are frozen; the Coordinator owns the list
  of results while running and hands the Reporter an immutable tuple.
- PipelineReport.total_seconds is wall clock from pipeline start to end,
  NOT the sum of stage durations (gaps between stages count).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from graphload.contracts.enums import IndexName, TupleKind

if TYPE_CHECKING:
    from graphload.core.config import JobConfig


@dataclass(frozen=True)
class IndexSpec:
    """One index to build: its name and the tuple kind it orders."""

    name: IndexName
    kind: TupleKind

    @classmethod
    def for_name(cls, name: IndexName) -> IndexSpec:
        """Create spec with the kind implied by the index name."""
        return cls(name=name, kind=name.kind)


class IngestCounts(BaseModel):
    """Tuple counts written by the ingest stage.

    Matches the counts artifact JSON: {"triples": N, "quads": M, ...}.
    Extra fields in the artifact are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    triples: int = Field(ge=0, description="Number of triples ingested")
    quads: int = Field(ge=0, description="Number of quads ingested")

    @property
    def total(self) -> int:
        """Combined tuple count."""
        return self.triples + self.quads

    def count_for(self, kind: TupleKind) -> int:
        """Count for one tuple kind."""
        return self.triples if kind is TupleKind.TRIPLES else self.quads


@dataclass(frozen=True)
class StageResult:
    """Timing of one executed stage."""

    name: str
    started_at: datetime
    duration_seconds: float


@dataclass(frozen=True)
class ToolInventory:
    """Absolute paths of the external tools found by preflight."""

    java: Path
    sort: Path
    gzip: Path


def throughput(tuples: int, seconds: float) -> float | None:
    """Tuples per second, or None when no time elapsed."""
    if seconds <= 0:
        return None
    return tuples / seconds


@dataclass(frozen=True)
class PipelineReport:
    """Everything known about a finished load.

    Attributes:
        config: Job that was run
        stages: Executed stages in execution order
        counts: Ingest counts, None if the artifact was absent
        total_seconds: Wall clock from pipeline start to pipeline end
    """

    config: JobConfig
    stages: tuple[StageResult, ...]
    counts: IngestCounts | None
    total_seconds: float

    @property
    def stage_names(self) -> list[str]:
        """Names of executed stages, in order."""
        return [stage.name for stage in self.stages]

    @property
    def tuple_count(self) -> int | None:
        """Triples plus quads, None when counts are unavailable."""
        if self.counts is None:
            return None
        return self.counts.total

    @property
    def throughput(self) -> float | None:
        """Tuples per second over the wall-clock total.

        None when counts are unavailable or no time elapsed.
        """
        if self.counts is None:
            return None
        return throughput(self.counts.total, self.total_seconds)
