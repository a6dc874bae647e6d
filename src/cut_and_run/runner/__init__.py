"""Scan-then-dispatch orchestration."""

from cut_and_run.runner.run import RunSummary, build_assignments, dispatch_workers, run

__all__ = ["RunSummary", "build_assignments", "dispatch_workers", "run"]
