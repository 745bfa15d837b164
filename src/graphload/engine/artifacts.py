# src/graphload/engine/artifacts.py
"""Intermediate artifacts in the temp directory.

The ingest stage is the only writer; every index stage reads the tuple
files. Nothing here deletes artifacts - cleanup is left to the operator.
"""

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from graphload.contracts.errors import CountsArtifactError
from graphload.contracts.results import IngestCounts

TRIPLES_FILE = "data-triples.tmp"
QUADS_FILE = "data-quads.tmp"
COUNTS_FILE = "load.json"


@dataclass(frozen=True)
class WorkArtifacts:
    """Paths of the artifacts shared between stages.

    Attributes:
        triples: Encoded triple tuples written by ingest
        quads: Encoded quad tuples written by ingest
        counts: JSON tuple counts, optionally written by ingest
    """

    triples: Path
    quads: Path
    counts: Path

    @classmethod
    def in_tmpdir(cls, tmpdir: Path) -> "WorkArtifacts":
        """Artifact paths at their fixed names inside tmpdir."""
        return cls(
            triples=tmpdir / TRIPLES_FILE,
            quads=tmpdir / QUADS_FILE,
            counts=tmpdir / COUNTS_FILE,
        )


def read_ingest_counts(path: Path) -> IngestCounts | None:
    """Read the counts artifact written by ingest.

    Args:
        path: Location of the counts JSON file

    Returns:
        IngestCounts, or None if the artifact does not exist

    Raises:
        CountsArtifactError: If the file exists but is unreadable or malformed
    """
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CountsArtifactError(path, str(e)) from e
    try:
        return IngestCounts.model_validate_json(text)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(x) for x in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise CountsArtifactError(path, problems) from e
