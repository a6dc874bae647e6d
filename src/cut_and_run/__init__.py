"""Cut and Run - Stream line-aligned pieces of a large file through parallel commands."""

from cut_and_run.runner import RunSummary, run
from cut_and_run.scan import find_partition_plan

__all__ = ["RunSummary", "find_partition_plan", "run"]
