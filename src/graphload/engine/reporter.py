"""Final load summary.

Example:
    node-table        12.40 s
    ingest            30.02 s
    SPO                8.11 s
    Total time        51.00 s
    Tuples            500
    Rate              9.80 tuples/s

Tuple and rate lines are omitted when ingest wrote no counts artifact.
"""

from graphload.contracts.results import PipelineReport

_LABEL_WIDTH = 16


def _line(label: str, value: str) -> str:
    return f"{label:<{_LABEL_WIDTH}}{value}"


def format_report(report: PipelineReport) -> str:
    """Render a PipelineReport as plain text, one stage per line."""
    lines = [_line(stage.name, f"{stage.duration_seconds:>10.2f} s") for stage in report.stages]
    lines.append(_line("Total time", f"{report.total_seconds:>10.2f} s"))

    if report.counts is not None:
        lines.append(_line("Tuples", f"{report.counts.total:,}"))
        rate = report.throughput
        if rate is None:
            lines.append(_line("Rate", "unavailable"))
        else:
            lines.append(_line("Rate", f"{rate:,.2f} tuples/s"))

    return "\n".join(lines)
