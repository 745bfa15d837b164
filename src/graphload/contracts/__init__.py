"""Shared contracts for graphload.

This package contains the types that cross module boundaries:
enums, errors, and result records. Nothing here imports from
core/ or engine/ at runtime.
"""

from graphload.contracts.enums import (
    ExitCode,
    IndexName,
    SystemVariant,
    TupleKind,
)
from graphload.contracts.errors import (
    ConfigError,
    CountsArtifactError,
    EnvironmentCheckError,
    InvalidThreadCountError,
    LoaderError,
    LocationExistsError,
    MissingLocationError,
    NoInputFilesError,
    PipelineError,
    RuntimeSettingsError,
    StageFailedError,
    TempDirUnusableError,
    UnknownSystemError,
    UnrecognizedOptionError,
    UnsupportedSystemError,
)
from graphload.contracts.results import (
    IndexSpec,
    IngestCounts,
    PipelineReport,
    StageResult,
    ToolInventory,
    throughput,
)

__all__ = [
    # enums
    "ExitCode",
    "IndexName",
    "SystemVariant",
    "TupleKind",
    # errors
    "ConfigError",
    "CountsArtifactError",
    "EnvironmentCheckError",
    "InvalidThreadCountError",
    "LoaderError",
    "LocationExistsError",
    "MissingLocationError",
    "NoInputFilesError",
    "PipelineError",
    "RuntimeSettingsError",
    "StageFailedError",
    "TempDirUnusableError",
    "UnknownSystemError",
    "UnrecognizedOptionError",
    "UnsupportedSystemError",
    # results
    "IndexSpec",
    "IngestCounts",
    "PipelineReport",
    "StageResult",
    "ToolInventory",
    "throughput",
]
