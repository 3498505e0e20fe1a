"""Result types and reports for solver runs."""

__all__ = [
    "ExpansionRecord",
    "SolveOutcome",
    "SolveResult",
]

from gridpathfinder.report.dtypes import ExpansionRecord, SolveOutcome, SolveResult
