"""Line-boundary scanning and partition planning."""

from cut_and_run.scan.boundaries import (
    find_partition_plan,
    preferred_block_size,
    scan_line_starts,
)
from cut_and_run.scan.plan import lines_per_worker, plan_partitions
from cut_and_run.scan.types import LineIndex, PartitionPlan

__all__ = [
    "LineIndex",
    "PartitionPlan",
    "find_partition_plan",
    "lines_per_worker",
    "plan_partitions",
    "preferred_block_size",
    "scan_line_starts",
]
