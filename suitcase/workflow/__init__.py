"""Batch workflow for Suitcase.

This package contains:
- batch: sequential per-project command runner with failure aggregation
"""

from suitcase.workflow.batch import (
    BatchResult,
    ProjectFailure,
    run_for_each_project,
)

__all__ = [
    "BatchResult",
    "ProjectFailure",
    "run_for_each_project",
]
