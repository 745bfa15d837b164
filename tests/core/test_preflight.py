"""Tests for preflight tool checks."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from graphload.contracts.errors import EnvironmentCheckError
from graphload.core.preflight import probe_sort_parallel, validate_environment

GZIP = Path("/bin/gzip")


def _which(available: dict[str, str]) -> Callable[[str], str | None]:
    return available.get


class TestValidateEnvironment:
    """validate_environment() accumulates every problem."""

    def test_all_present(self) -> None:
        inventory = validate_environment(
            which=_which({"java": "/usr/bin/java", "sort": "/usr/bin/sort"}),
            sort_probe=lambda path: True,
            is_file=lambda path: path == GZIP,
        )

        assert inventory.java == Path("/usr/bin/java")
        assert inventory.sort == Path("/usr/bin/sort")
        assert inventory.gzip == GZIP

    def test_second_gzip_location(self) -> None:
        inventory = validate_environment(
            which=_which({"java": "/j", "sort": "/s"}),
            sort_probe=lambda path: True,
            is_file=lambda path: path == Path("/usr/bin/gzip"),
        )
        assert inventory.gzip == Path("/usr/bin/gzip")

    def test_gzip_on_path_is_not_enough(self) -> None:
        with pytest.raises(EnvironmentCheckError) as exc_info:
            validate_environment(
                which=_which({"java": "/j", "sort": "/s", "gzip": "/opt/bin/gzip"}),
                sort_probe=lambda path: True,
                is_file=lambda path: False,
            )
        assert len(exc_info.value.problems) == 1
        assert "gzip" in exc_info.value.problems[0]

    def test_reports_all_missing_at_once(self) -> None:
        with pytest.raises(EnvironmentCheckError) as exc_info:
            validate_environment(
                which=_which({}),
                sort_probe=lambda path: True,
                is_file=lambda path: False,
            )

        problems = exc_info.value.problems
        assert len(problems) == 3
        assert any("'java'" in p for p in problems)
        assert any("'sort'" in p for p in problems)
        assert any("gzip" in p for p in problems)

    def test_sort_without_parallel(self) -> None:
        probed: list[str] = []

        def probe(path: str) -> bool:
            probed.append(path)
            return False

        with pytest.raises(EnvironmentCheckError) as exc_info:
            validate_environment(
                which=_which({"java": "/j", "sort": "/bin/sort"}),
                sort_probe=probe,
                is_file=lambda path: True,
            )

        assert probed == ["/bin/sort"]
        assert "--parallel" in exc_info.value.problems[0]

    def test_sort_not_probed_when_missing(self) -> None:
        probed: list[str] = []

        def probe(path: str) -> bool:
            probed.append(path)
            return True

        with pytest.raises(EnvironmentCheckError):
            validate_environment(
                which=_which({"java": "/j"}),
                sort_probe=probe,
                is_file=lambda path: True,
            )
        assert probed == []

    def test_exit_code(self) -> None:
        from graphload.contracts import ExitCode

        assert EnvironmentCheckError(["x"]).exit_code == ExitCode.MISSING_TOOLS


class TestProbeSortParallel:
    """probe_sort_parallel() runs the real program."""

    def test_zero_exit_is_supported(self, tmp_path: Path) -> None:
        script = tmp_path / "fake_sort"
        script.write_text(f"#!{sys.executable}\nimport sys\nsys.exit(0)\n")
        script.chmod(0o755)
        assert probe_sort_parallel(str(script)) is True

    def test_nonzero_exit_is_unsupported(self, tmp_path: Path) -> None:
        script = tmp_path / "fake_sort"
        script.write_text(f"#!{sys.executable}\nimport sys\nsys.exit(2)\n")
        script.chmod(0o755)
        assert probe_sort_parallel(str(script)) is False

    def test_missing_program_is_unsupported(self, tmp_path: Path) -> None:
        assert probe_sort_parallel(str(tmp_path / "no-such-sort")) is False
