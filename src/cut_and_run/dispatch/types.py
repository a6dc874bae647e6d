"""Shared type definitions for worker dispatch."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

# A shell command line, or an argument vector run without a shell.
Command: TypeAlias = str | Sequence[str]


@dataclass(frozen=True, slots=True)
class WorkerAssignment:
    """One worker's half-open byte range and where its command writes."""

    index: int
    start: int
    end: int
    target: str

    @property
    def length(self) -> int:
        return max(self.end - self.start, 0)


@dataclass
class CopyStats:
    """Progress of one range copy into a command's input stream."""

    bytes_sent: int = 0
    reader_closed: bool = False


@dataclass(frozen=True, slots=True)
class WorkerResult:
    """Outcome of one worker: bytes delivered and the command's exit status."""

    index: int
    target: str
    bytes_requested: int
    bytes_sent: int
    returncode: int
    reader_closed: bool
