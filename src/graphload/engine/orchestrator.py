# src/graphload/engine/orchestrator.py
"""Pipeline coordinator: full bulk-load lifecycle.

Coordinates, strictly in this order:
- Node-table build (variants with a separate node-table phase)
- Tuple ingest
- Counts artifact read and index-skip decision
- One index build per surviving catalog entry

Stages never run concurrently and are never reordered: ingest output is a
hard data dependency of every index stage, and the node table is a hard
dependency of ingest. The first failing stage stops the pipeline.
"""

import time
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from graphload.contracts.enums import TupleKind
from graphload.contracts.results import PipelineReport, StageResult
from graphload.core.config import JobConfig
from graphload.core.logging import get_logger
from graphload.engine.artifacts import WorkArtifacts, read_ingest_counts
from graphload.engine.catalog import indexes_of_kind, select_indexes
from graphload.engine.launcher import BuilderLauncher
from graphload.engine.runner import StageRunnerProtocol

logger = get_logger(__name__)

NODE_TABLE_STAGE = "node-table"
INGEST_STAGE = "ingest"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class PipelineCoordinator:
    """Runs the build stages for one job and collects their timings.

    The list of StageResults belongs to a single run() call; the Reporter
    only ever sees the immutable tuple inside PipelineReport.
    """

    def __init__(
        self,
        launcher: BuilderLauncher,
        runner: StageRunnerProtocol,
        *,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._launcher = launcher
        self._runner = runner
        self._clock = clock
        self._now = now

    def _run_stage(
        self,
        results: list[StageResult],
        name: str,
        command: Sequence[str],
    ) -> None:
        """Run one stage and append its result. Failures propagate."""
        started_at = self._now()
        logger.info("Stage started", stage=name)
        duration = self._runner.run_stage(name, command)
        results.append(StageResult(name=name, started_at=started_at, duration_seconds=duration))
        logger.info("Stage finished", stage=name, seconds=round(duration, 2))

    def run(self, config: JobConfig) -> PipelineReport:
        """Execute the bulk load.

        Args:
            config: Validated job

        Returns:
            PipelineReport for the completed load

        Raises:
            StageFailedError: A stage exited non-zero; later stages did not run
            CountsArtifactError: The counts artifact exists but is malformed
        """
        artifacts = WorkArtifacts.in_tmpdir(config.tmpdir)
        results: list[StageResult] = []

        logger.info(
            "Load started",
            location=str(config.location),
            tmpdir=str(config.tmpdir),
            threads=config.threads,
            files=len(config.data_files),
            system=config.system.value,
        )
        start = self._clock()

        if config.system.has_node_table_phase:
            self._run_stage(results, NODE_TABLE_STAGE, self._launcher.node_table(config))

        self._run_stage(results, INGEST_STAGE, self._launcher.ingest(config, artifacts))

        counts = read_ingest_counts(artifacts.counts)
        if counts is None:
            logger.info("No counts artifact; building all indexes", path=str(artifacts.counts))
        else:
            logger.info("Ingest counts", triples=counts.triples, quads=counts.quads)
            for kind in TupleKind:
                if counts.count_for(kind) == 0:
                    logger.info(
                        "Skipping indexes",
                        kind=kind.value,
                        indexes=[spec.name.value for spec in indexes_of_kind(kind)],
                    )

        for spec in select_indexes(counts):
            self._run_stage(results, spec.name.value, self._launcher.index(config, artifacts, spec))

        total_seconds = self._clock() - start
        logger.info("Load finished", location=str(config.location), seconds=round(total_seconds, 2))

        return PipelineReport(
            config=config,
            stages=tuple(results),
            counts=counts,
            total_seconds=total_seconds,
        )
