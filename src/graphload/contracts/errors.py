"""Error taxonomy for the loader.

Every failure is fatal. Components raise; only the CLI entry point converts
an error into a process exit code, using the error's ``exit_code``.

Hierarchy:
    LoaderError
    ├── EnvironmentCheckError    (missing or incapable tools, exit 9)
    ├── RuntimeSettingsError     (no classpath could be derived, exit 1)
    ├── ConfigError              (bad options, exit code per sub-kind)
    └── PipelineError            (failure after the pipeline started, exit 1)
        ├── StageFailedError
        └── CountsArtifactError
"""

from collections.abc import Sequence
from pathlib import Path

from graphload.contracts.enums import ExitCode


class LoaderError(Exception):
    """Base class for all loader failures."""

    exit_code: ExitCode = ExitCode.FAILURE


class EnvironmentCheckError(LoaderError):
    """Raised when preflight finds missing or incapable tools.

    Carries every problem found, not just the first one.
    """

    exit_code = ExitCode.MISSING_TOOLS

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = tuple(problems)
        super().__init__("Missing required capabilities: " + "; ".join(self.problems))


class RuntimeSettingsError(LoaderError):
    """Raised when the JVM launch environment cannot be resolved."""


class ConfigError(LoaderError):
    """Raised when command-line options are malformed or conflicting."""


class InvalidThreadCountError(ConfigError):
    """Thread count is not an optionally signed integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid thread count: {value!r} (expected an integer such as 2 or -1)")


class NoInputFilesError(ConfigError):
    """No data files were given."""

    def __init__(self) -> None:
        super().__init__("No data files given")


class MissingLocationError(ConfigError):
    """The database location option was not set."""

    def __init__(self) -> None:
        super().__init__("Database location not set (use --loc)")


class LocationExistsError(ConfigError):
    """The database location already exists. Never overwritten."""

    exit_code = ExitCode.LOCATION_EXISTS

    def __init__(self, location: Path) -> None:
        self.location = location
        super().__init__(f"Database location already exists: {location}")


class TempDirUnusableError(ConfigError):
    """The temp directory could not be created or is not writable."""

    exit_code = ExitCode.TMPDIR_OR_SYSTEM

    def __init__(self, tmpdir: Path, reason: str) -> None:
        self.tmpdir = tmpdir
        self.reason = reason
        super().__init__(f"Temp directory unusable: {tmpdir} ({reason})")


class UnrecognizedOptionError(ConfigError):
    """A flag before the end-of-options marker was not recognised."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognized option: {token}")


class UnknownSystemError(ConfigError):
    """The system variant name is not one the loader knows."""

    exit_code = ExitCode.TMPDIR_OR_SYSTEM

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unrecognized system variant: {name!r}")


class UnsupportedSystemError(ConfigError):
    """The system variant is known but cannot be built by this loader."""

    exit_code = ExitCode.MISSING_TOOLS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"System variant not supported: {name!r}")


class PipelineError(LoaderError):
    """Raised when the pipeline fails after it has started.

    The database is left in an indeterminate, unusable state.
    """


class StageFailedError(PipelineError):
    """A build stage subprocess exited non-zero.

    Attributes:
        stage: Stage name (e.g. "ingest", "SPO")
        returncode: Subprocess exit status
        command_line: Full invoked command line, shell-quoted
    """

    def __init__(self, stage: str, returncode: int, command_line: str) -> None:
        self.stage = stage
        self.returncode = returncode
        self.command_line = command_line
        super().__init__(f"Stage '{stage}' failed with exit code {returncode}")


class CountsArtifactError(PipelineError):
    """The ingest counts artifact exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read counts artifact {path}: {reason}")
