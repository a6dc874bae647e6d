import logging
import time
from collections.abc import Sequence
from concurrent.futures import FIRST_EXCEPTION, wait
from dataclasses import dataclass
from pathlib import Path

from cut_and_run.dispatch import (
    Command,
    WorkerAssignment,
    WorkerResult,
    output_target,
    run_worker,
)
from cut_and_run.runner.execution import (
    ExecutorClass,
    describe_executor,
    get_executor_class,
    get_thread_count,
)
from cut_and_run.scan import PartitionPlan, find_partition_plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Partition plan of a finished run and the result of every worker."""

    plan: PartitionPlan
    results: tuple[WorkerResult, ...]

    @property
    def bytes_sent(self) -> int:
        return sum(result.bytes_sent for result in self.results)


def build_assignments(
    plan: PartitionPlan,
    stem: str,
    extension: str = "",
) -> list[WorkerAssignment]:
    """Pair each consecutive plan entry into one worker's range and target."""
    thread_count = len(plan) - 1
    return [
        WorkerAssignment(
            index=i,
            start=plan[i],
            end=plan[i + 1],
            target=output_target(stem, i, thread_count, extension),
        )
        for i in range(thread_count)
    ]


def dispatch_workers(
    input_path: str,
    command: Command,
    assignments: Sequence[WorkerAssignment],
    executor_class: ExecutorClass,
) -> list[WorkerResult]:
    """
    Run one worker per assignment and wait for all of them.

    Every worker gets its own pool slot, so all ranges stream at once. When a
    worker fails, workers that have not started are cancelled, the running
    ones are waited on, and the lowest-indexed failure is raised.
    """
    if executor_class is None:
        return [run_worker(input_path, command, assignment) for assignment in assignments]

    with executor_class(max_workers=len(assignments)) as executor:
        futures = [
            executor.submit(run_worker, input_path, command, assignment)
            for assignment in assignments
        ]
        _done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in pending:
            future.cancel()

    for future in futures:
        if not future.cancelled() and future.exception() is not None:
            raise future.exception()

    return [future.result() for future in futures]


def run(
    input_path: str,
    command: Command,
    stem: str,
    extension: str = "",
    thread_count: int | None = None,
) -> RunSummary:
    """
    Split ``input_path`` into line-aligned ranges and process them in parallel.

    Two phases with a barrier between them:
    1. Scan the file once and plan ``thread_count`` ranges
    2. Stream each range into its own instance of ``command``

    ``thread_count`` defaults to the OMP_NUM_THREADS configuration.
    """
    total_start = time.perf_counter()

    if thread_count is None:
        thread_count = get_thread_count()
    executor_class = get_executor_class()

    logger.info(
        f"Starting: file={Path(input_path).name}, threads={thread_count}, "
        f"executor={describe_executor(executor_class)}"
    )

    # Phase 1: scan and plan.
    t1_start = time.perf_counter()
    plan = find_partition_plan(input_path, thread_count)
    t1 = time.perf_counter() - t1_start
    logger.info("Scan done: %d ranges planned in %.2fs", thread_count, t1)
    logger.debug("Partition plan: %s", plan)

    # Phase 2: dispatch.
    t2_start = time.perf_counter()
    assignments = build_assignments(plan, stem, extension)
    results = dispatch_workers(input_path, command, assignments, executor_class)
    t2 = time.perf_counter() - t2_start

    summary = RunSummary(plan=plan, results=tuple(results))
    logger.info(
        "Dispatch done: %d bytes sent to %d workers in %.2fs",
        summary.bytes_sent,
        len(results),
        t2,
    )

    total_phases = t1 + t2
    if total_phases > 0:
        logger.debug(
            "Timing breakdown: Scan=%.2fs (%.0f%%), Dispatch=%.2fs (%.0f%%)",
            t1,
            100 * t1 / total_phases,
            t2,
            100 * t2 / total_phases,
        )

    logger.info("Finished in %.2fs", time.perf_counter() - total_start)
    return summary
