"""Concurrent workers that stream file ranges through external commands."""

from cut_and_run.dispatch.naming import NULL_SINK, output_target
from cut_and_run.dispatch.stream import copy_range
from cut_and_run.dispatch.types import Command, WorkerAssignment, WorkerResult
from cut_and_run.dispatch.worker import run_worker, spawn_command

__all__ = [
    "NULL_SINK",
    "Command",
    "WorkerAssignment",
    "WorkerResult",
    "copy_range",
    "output_target",
    "run_worker",
    "spawn_command",
]
