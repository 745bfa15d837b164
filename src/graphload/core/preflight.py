"""Preflight checks for the external tools the builders depend on.

Every check runs even after one fails so the operator gets the complete
list of missing capabilities in one pass.

Checks:
- java and sort are on PATH
- sort accepts --parallel (probed against empty input)
- gzip exists at one of the fixed absolute paths the builders invoke
"""

import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from graphload.contracts.errors import EnvironmentCheckError
from graphload.contracts.results import ToolInventory
from graphload.core.logging import get_logger

logger = get_logger(__name__)

REQUIRED_TOOLS: tuple[str, ...] = ("java", "sort")

# The builders call gzip by absolute path, so PATH lookup is not enough
GZIP_PATHS: tuple[Path, ...] = (Path("/bin/gzip"), Path("/usr/bin/gzip"))

SORT_PARALLEL_FLAG = "--parallel=2"


def probe_sort_parallel(sort_path: str) -> bool:
    """Check whether sort accepts the parallelism flag.

    Runs ``sort --parallel=2`` on empty input and checks exit status.
    """
    try:
        completed = subprocess.run(
            [sort_path, SORT_PARALLEL_FLAG],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        logger.debug("sort probe could not start", sort=sort_path, error=str(e))
        return False
    return completed.returncode == 0


def validate_environment(
    *,
    which: Callable[[str], str | None] = shutil.which,
    sort_probe: Callable[[str], bool] = probe_sort_parallel,
    is_file: Callable[[Path], bool] = Path.is_file,
    gzip_paths: Sequence[Path] = GZIP_PATHS,
) -> ToolInventory:
    """Confirm the external tools are present and capable.

    Args:
        which: PATH lookup (injectable for tests)
        sort_probe: Parallel-sort capability probe
        is_file: File existence check for the fixed gzip paths
        gzip_paths: Candidate absolute gzip locations, in preference order

    Returns:
        ToolInventory with the resolved tool paths

    Raises:
        EnvironmentCheckError: Listing every missing capability
    """
    problems: list[str] = []
    found: dict[str, str] = {}

    for tool in REQUIRED_TOOLS:
        path = which(tool)
        if path is None:
            problems.append(f"'{tool}' not found on PATH")
        else:
            found[tool] = path

    if "sort" in found and not sort_probe(found["sort"]):
        problems.append(f"'{found['sort']}' does not support {SORT_PARALLEL_FLAG}")

    gzip = next((p for p in gzip_paths if is_file(p)), None)
    if gzip is None:
        problems.append("gzip not found at " + " or ".join(str(p) for p in gzip_paths))

    if problems or gzip is None:
        for problem in problems:
            logger.error("Preflight check failed", problem=problem)
        raise EnvironmentCheckError(problems)

    inventory = ToolInventory(java=Path(found["java"]), sort=Path(found["sort"]), gzip=gzip)
    logger.debug(
        "Preflight passed",
        java=str(inventory.java),
        sort=str(inventory.sort),
        gzip=str(inventory.gzip),
    )
    return inventory
