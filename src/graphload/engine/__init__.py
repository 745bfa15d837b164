"""Load engine: PipelineCoordinator, StageRunner, BuilderLauncher, Reporter."""

from graphload.engine.artifacts import WorkArtifacts, read_ingest_counts
from graphload.engine.catalog import INDEX_CATALOG, select_indexes
from graphload.engine.launcher import BuilderLauncher
from graphload.engine.orchestrator import PipelineCoordinator
from graphload.engine.reporter import format_report
from graphload.engine.runner import StageRunnerProtocol, SubprocessStageRunner

__all__ = [
    "INDEX_CATALOG",
    "BuilderLauncher",
    "PipelineCoordinator",
    "StageRunnerProtocol",
    "SubprocessStageRunner",
    "WorkArtifacts",
    "format_report",
    "read_ingest_counts",
    "select_indexes",
]
