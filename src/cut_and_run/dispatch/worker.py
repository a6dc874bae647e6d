"""Lifecycle of a single worker: open, spawn, stream, wait."""

import logging
import subprocess

from cut_and_run.dispatch.stream import copy_range
from cut_and_run.dispatch.types import Command, WorkerAssignment, WorkerResult
from cut_and_run.errors import InputUnavailableError, ResourceExhaustedError, SpawnError
from cut_and_run.scan.boundaries import preferred_block_size

logger = logging.getLogger(__name__)


def describe_command(command: Command) -> str:
    """Render a command for log and error messages."""
    if isinstance(command, str):
        return command
    return subprocess.list2cmdline(command)


def spawn_command(command: Command, target: str) -> subprocess.Popen:
    """
    Start ``command`` reading from a pipe and writing to ``target``.

    String commands go through the shell; argument vectors are run directly.
    The target is truncated first, the same as a shell ``>`` redirection.
    """
    try:
        with open(target, "wb") as sink:
            return subprocess.Popen(
                command,
                shell=isinstance(command, str),
                stdin=subprocess.PIPE,
                stdout=sink,
            )
    except OSError as exc:
        raise SpawnError(
            f"Cannot pipe output: {describe_command(command)} > {target}: {exc}"
        ) from exc


def close_input(process: subprocess.Popen) -> bool:
    """Signal end of input; True if the command had already stopped reading."""
    try:
        process.stdin.close()
    except BrokenPipeError:
        return True
    return False


def run_worker(
    input_path: str,
    command: Command,
    assignment: WorkerAssignment,
) -> WorkerResult:
    """
    Stream one assigned byte range through its own copy of ``command``.

    The worker opens a private read handle so its cursor never races with
    another worker's, and waits for the command before releasing it.
    """
    try:
        source = open(input_path, "rb", buffering=0)  # noqa: SIM115
    except OSError as exc:
        raise InputUnavailableError(f"Cannot open {input_path}: {exc.strerror}") from exc

    with source:
        try:
            buffer = bytearray(preferred_block_size(source.fileno()))
        except MemoryError as exc:
            raise ResourceExhaustedError(
                f"Worker #{assignment.index}: cannot allocate read buffer"
            ) from exc

        logger.debug(
            "Worker #%d sending bytes %d to %d to %s > %s",
            assignment.index,
            assignment.start,
            assignment.end,
            describe_command(command),
            assignment.target,
        )

        with spawn_command(command, assignment.target) as process:
            try:
                stats = copy_range(
                    source,
                    process.stdin,
                    assignment.start,
                    assignment.length,
                    buffer,
                )
            except OSError as exc:
                raise InputUnavailableError(
                    f"Worker #{assignment.index}: cannot stream {input_path}: {exc}"
                ) from exc
            finally:
                closed_early = close_input(process)
            returncode = process.wait()

    reader_closed = stats.reader_closed or closed_early
    if reader_closed:
        logger.warning(
            "Worker #%d: command closed its input after %d of %d bytes",
            assignment.index,
            stats.bytes_sent,
            assignment.length,
        )
    if returncode != 0:
        logger.debug("Worker #%d: command exited with status %d", assignment.index, returncode)

    return WorkerResult(
        index=assignment.index,
        target=assignment.target,
        bytes_requested=assignment.length,
        bytes_sent=stats.bytes_sent,
        returncode=returncode,
        reader_closed=reader_closed,
    )
