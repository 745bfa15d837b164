# src/graphload/core/config.py
"""
Job configuration and runtime settings for a bulk load.

Uses Pydantic for validation and Dynaconf for environment overrides.
Settings are frozen (immutable) after construction.

Two separate things are resolved here:
- JobConfig: what to load and where (from command-line options)
- RuntimeSettings: how to launch the external builders (from the environment)
"""

import os
import re
import shlex
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from graphload.contracts.enums import SystemVariant
from graphload.contracts.errors import (
    InvalidThreadCountError,
    LocationExistsError,
    MissingLocationError,
    NoInputFilesError,
    RuntimeSettingsError,
    TempDirUnusableError,
    UnknownSystemError,
    UnsupportedSystemError,
)

# Optional sign followed by digits
_THREADS_PATTERN = re.compile(r"^[+-]?[0-9]+$")

DEFAULT_THREADS = "2"

DEFAULT_JVM_ARGS = "-Xmx2G"


class JobConfig(BaseModel):
    """A validated bulk-load job.

    Invariants at job start: location does not exist, tmpdir is a writable
    directory. Both are checked by resolve_config(), not here, because they
    depend on the filesystem at resolution time.
    """

    model_config = ConfigDict(frozen=True)

    location: Path = Field(description="Database directory to create")
    tmpdir: Path = Field(description="Working directory for intermediate artifacts")
    threads: int = Field(
        default=int(DEFAULT_THREADS),
        description="Sort parallelism passed through to builders; -1 means unbounded",
    )
    data_files: tuple[Path, ...] = Field(
        min_length=1,
        description="Input data files, in load order",
    )
    system: SystemVariant = Field(
        default=SystemVariant.TDB2,
        description="Database variant to build",
    )
    debug: bool = Field(default=False, description="Verbose diagnostic logging")


def parse_threads(value: str) -> int:
    """Parse a thread-count option.

    Any optionally signed integer is accepted and passed through to the
    builders as-is; -1 asks the external sort for its own default.

    Args:
        value: Raw option text

    Returns:
        The integer value

    Raises:
        InvalidThreadCountError: If value is not an optionally signed integer
    """
    text = value.strip()
    if not _THREADS_PATTERN.match(text):
        raise InvalidThreadCountError(value)
    return int(text)


def parse_system(value: str) -> SystemVariant:
    """Parse a system variant name (case-insensitive).

    Raises:
        UnknownSystemError: Name is not a known variant
        UnsupportedSystemError: Variant is known but cannot be built
    """
    try:
        system = SystemVariant(value.strip().lower())
    except ValueError:
        raise UnknownSystemError(value) from None
    if not system.supported:
        raise UnsupportedSystemError(value)
    return system


def _prepare_tmpdir(tmpdir: Path) -> None:
    """Create tmpdir if needed and confirm it is a writable directory."""
    try:
        tmpdir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise TempDirUnusableError(tmpdir, f"cannot create: {e.strerror or e}") from e
    if not tmpdir.is_dir():
        raise TempDirUnusableError(tmpdir, "not a directory")
    if not os.access(tmpdir, os.W_OK | os.X_OK):
        raise TempDirUnusableError(tmpdir, "not writable")


def resolve_config(
    *,
    location: str | None,
    tmpdir: str | None = None,
    threads: str = DEFAULT_THREADS,
    data_files: Sequence[str] = (),
    system: str = SystemVariant.TDB2.value,
    debug: bool = False,
) -> JobConfig:
    """Resolve parsed command-line options into a JobConfig.

    Checks run in a fixed order so the first problem reported is stable:
    thread count, system variant, data files, location, then temp directory.
    The temp directory is created only after every other check passes.

    Args:
        location: Database location (--loc)
        tmpdir: Temp directory (--tmpdir), defaults to location
        threads: Raw thread-count text (--threads)
        data_files: Positional data file arguments
        system: System variant name (--system)
        debug: Verbose logging flag (--debug)

    Returns:
        Validated, immutable JobConfig

    Raises:
        ConfigError: A subclass naming the specific problem
    """
    thread_count = parse_threads(threads)
    variant = parse_system(system)

    if not data_files:
        raise NoInputFilesError()

    if not location:
        raise MissingLocationError()

    location_path = Path(location).absolute()
    # exists() follows symlinks; a dangling link still occupies the name
    if location_path.exists() or location_path.is_symlink():
        raise LocationExistsError(location_path)

    tmpdir_path = Path(tmpdir).absolute() if tmpdir else location_path
    _prepare_tmpdir(tmpdir_path)

    return JobConfig(
        location=location_path,
        tmpdir=tmpdir_path,
        threads=thread_count,
        data_files=tuple(Path(f) for f in data_files),
        system=variant,
        debug=debug,
    )


class RuntimeSettings(BaseModel):
    """How to launch the external builder commands.

    Example environment:
        JENA_HOME=/opt/jena            # classpath becomes /opt/jena/lib/*
        JENA_CP=/opt/jena/lib/*        # explicit classpath, wins over JENA_HOME
        JVM_ARGS="-Xmx8G -XX:+UseParallelGC"
        GRAPHLOAD_JAVA=/usr/lib/jvm/java-17/bin/java
    """

    model_config = ConfigDict(frozen=True)

    java: str | None = Field(
        default=None,
        description="Java launcher command; None uses the java found by preflight",
    )
    classpath: str = Field(min_length=1, description="JVM classpath for the builders")
    jvm_args: tuple[str, ...] = Field(
        default=(DEFAULT_JVM_ARGS,),
        description="Arguments passed to the JVM before the main class",
    )
    node_table_class: str = Field(
        default="org.apache.jena.tdb2.xloader.CmdxBuildNodeTable",
        description="Main class of the node-table builder",
    )
    ingest_class: str = Field(
        default="org.apache.jena.tdb2.xloader.CmdxIngestData",
        description="Main class of the ingest builder",
    )
    index_class: str = Field(
        default="org.apache.jena.tdb2.xloader.CmdxBuildIndex",
        description="Main class of the index builder",
    )


# Keys accepted from GRAPHLOAD_* environment variables
_OVERRIDE_KEYS = frozenset({"java", "node_table_class", "ingest_class", "index_class"})


def _load_overrides() -> dict[str, Any]:
    """Load GRAPHLOAD_* overrides via Dynaconf.

    Environment variable format: GRAPHLOAD_INGEST_CLASS=com.example.Ingest.
    Unknown keys are ignored.
    """
    from dynaconf import Dynaconf

    dynaconf_settings = Dynaconf(
        envvar_prefix="GRAPHLOAD",
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # Don't auto-load .env
    )
    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    return {
        k.lower(): str(v)
        for k, v in dynaconf_settings.as_dict().items()
        if k.lower() in _OVERRIDE_KEYS
    }


def load_runtime_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Resolve the JVM launch environment.

    Precedence for the classpath:
    1. JENA_CP - explicit classpath
    2. JENA_HOME/lib/* - derived from the installation home

    GRAPHLOAD_* overrides are always read from the process environment by
    Dynaconf, even when environ is given; environ only supplies JENA_CP,
    JENA_HOME and JVM_ARGS.

    Args:
        environ: Mapping for JENA_CP, JENA_HOME and JVM_ARGS (defaults to
            os.environ)

    Returns:
        Validated RuntimeSettings

    Raises:
        RuntimeSettingsError: If neither JENA_CP nor JENA_HOME is set
    """
    env = os.environ if environ is None else environ

    classpath = env.get("JENA_CP", "")
    if not classpath:
        home = env.get("JENA_HOME", "")
        if not home:
            raise RuntimeSettingsError(
                "JENA_HOME is not set and JENA_CP is not set: cannot locate the builders"
            )
        classpath = str(Path(home) / "lib" / "*")

    jvm_args = tuple(shlex.split(env.get("JVM_ARGS", "") or DEFAULT_JVM_ARGS))

    return RuntimeSettings(classpath=classpath, jvm_args=jvm_args, **_load_overrides())
