# tests/conftest.py
"""Shared test fixtures and helpers.

Provides a recording stage runner that stands in for the external
builders, plus a factory for validated JobConfigs.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import json
import os
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from graphload.contracts.errors import StageFailedError
from graphload.core.config import JobConfig, RuntimeSettings
from graphload.engine.launcher import BuilderLauncher

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


class RecordingRunner:
    """Stage runner that records calls instead of starting processes.

    Usage:
        runner = RecordingRunner(counts={"triples": 0, "quads": 10})
        coordinator = PipelineCoordinator(launcher, runner)

    Args:
        counts: Written as the counts artifact when the ingest stage runs
            (None writes nothing)
        fail_stage: Stage name that exits non-zero
        fail_code: Exit status for the failing stage
        duration: Seconds reported for every stage
    """

    def __init__(
        self,
        *,
        counts: dict[str, object] | None = None,
        fail_stage: str | None = None,
        fail_code: int = 1,
        duration: float = 1.0,
    ) -> None:
        self.counts = counts
        self.fail_stage = fail_stage
        self.fail_code = fail_code
        self.duration = duration
        self.calls: list[tuple[str, list[str]]] = []

    @property
    def stage_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def command_for(self, name: str) -> list[str]:
        return next(command for stage, command in self.calls if stage == name)

    def run_stage(self, name: str, command: Sequence[str]) -> float:
        self.calls.append((name, list(command)))
        if name == self.fail_stage:
            raise StageFailedError(name, self.fail_code, " ".join(command))
        if name == "ingest" and self.counts is not None:
            tmpdir = Path(command[command.index("--tmpdir") + 1])
            (tmpdir / "load.json").write_text(json.dumps(self.counts))
        return self.duration


@pytest.fixture
def runtime_settings() -> RuntimeSettings:
    """RuntimeSettings with a fixed classpath and default builders."""
    return RuntimeSettings(classpath="/opt/jena/lib/*", jvm_args=("-Xmx2G",))


@pytest.fixture
def launcher(runtime_settings: RuntimeSettings) -> BuilderLauncher:
    """Launcher using a fixed java path."""
    return BuilderLauncher(runtime_settings, java="/usr/bin/java")


@pytest.fixture
def make_job(tmp_path: Path) -> Callable[..., JobConfig]:
    """Factory for JobConfigs rooted in tmp_path.

    The location does not exist; tmpdir is created.
    """

    def _make(**overrides: object) -> JobConfig:
        tmpdir = tmp_path / "work"
        tmpdir.mkdir(exist_ok=True)
        fields: dict[str, object] = {
            "location": tmp_path / "db",
            "tmpdir": tmpdir,
            "threads": 2,
            "data_files": (tmp_path / "data.nq",),
        }
        fields.update(overrides)
        return JobConfig(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def recording_runner() -> type[RecordingRunner]:
    """The RecordingRunner class, for tests to construct with their own options."""
    return RecordingRunner
