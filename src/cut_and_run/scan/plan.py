"""Downsampling of line starts into a fixed partition plan."""

from collections.abc import Sequence

from cut_and_run.scan.types import PartitionPlan


def lines_per_worker(total_lines: int, thread_count: int) -> int:
    """
    Number of lines between consecutive partition boundaries.

    Always rounds up by one line, so the walk over the line starts yields at
    most ``thread_count`` samples even when the division is uneven.
    """
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")
    return total_lines // thread_count + 1


def plan_partitions(
    line_starts: Sequence[int],
    eof_sentinel: int,
    thread_count: int,
) -> PartitionPlan:
    """
    Sample every ``lines_per_worker`` line start and close with the sentinel.

    The result has exactly ``thread_count + 1`` non-decreasing offsets. When
    the walk produces fewer than ``thread_count`` samples the tail is filled
    with the sentinel, which gives the surplus workers empty ranges.
    """
    total_lines = len(line_starts)
    step = lines_per_worker(total_lines, thread_count)

    plan = [line_starts[c] for c in range(0, total_lines, step)]
    if not plan:
        plan.append(0)

    plan.extend([eof_sentinel] * (thread_count + 1 - len(plan)))
    return tuple(plan)
