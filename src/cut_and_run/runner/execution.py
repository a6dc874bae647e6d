"""Run configuration from the environment and executor selection."""

import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

from cut_and_run.errors import ConfigurationError

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Same variable OpenMP programs read, so existing job scripts keep working.
THREAD_COUNT_ENV = "OMP_NUM_THREADS"

# Environment variable to override executor selection.
EXECUTOR_ENV = "CUT_AND_RUN_EXECUTOR"

DEFAULT_THREAD_COUNT = os.cpu_count() or 1

# Policy name -> executor; None runs workers one by one in the caller.
EXECUTOR_POLICIES: dict[str, ExecutorClass] = {
    "threads": ThreadPoolExecutor,
    "processes": ProcessPoolExecutor,
    "serial": None,
}
DEFAULT_EXECUTOR_POLICY = "threads"


def get_thread_count() -> int:
    """
    Read the worker count from OMP_NUM_THREADS.

    Parsed the way strtoul reads it: leading whitespace and a "+" sign are
    accepted, anything after the digits is not. Unset or blank falls back to
    DEFAULT_THREAD_COUNT; zero and negative counts are rejected.
    """
    value = os.environ.get(THREAD_COUNT_ENV, "")
    if not value.strip():
        return DEFAULT_THREAD_COUNT

    digits = value.lstrip().removeprefix("+")
    if not (digits.isascii() and digits.isdigit()) or int(digits) == 0:
        raise ConfigurationError(f"Invalid {THREAD_COUNT_ENV}: {value}.")
    return int(digits)


def get_executor_class() -> ExecutorClass:
    """
    Select the executor that runs the workers.

    CUT_AND_RUN_EXECUTOR may be "threads" (default), "processes", or "serial".
    Workers spend their time blocked on file reads, pipe writes and waiting
    for their command, so threads are enough to run them all at once.

    "serial" mode runs in the main thread - useful for debugging with breakpoints.
    """
    policy = os.environ.get(EXECUTOR_ENV, "").strip().lower() or DEFAULT_EXECUTOR_POLICY
    try:
        return EXECUTOR_POLICIES[policy]
    except KeyError:
        raise ConfigurationError(
            f"Invalid {EXECUTOR_ENV}: {policy} (expected {', '.join(EXECUTOR_POLICIES)})."
        ) from None


def describe_executor(executor_class: ExecutorClass) -> str:
    """Name of the policy that selects ``executor_class``."""
    for policy, candidate in EXECUTOR_POLICIES.items():
        if candidate is executor_class:
            return policy
    return executor_class.__name__
