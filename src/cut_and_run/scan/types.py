"""Shared constants and records for boundary scanning."""

from array import array
from dataclasses import dataclass
from typing import TypeAlias

# Only this byte terminates a line.
BOUNDARY_BYTE = b"\n"

# 1MB fallback when the filesystem does not report a preferred block size.
BUFFER_SIZE = 1024 * 1024

# Signed 64-bit offsets.
OFFSET_TYPECODE = "q"

PartitionPlan: TypeAlias = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Result of one forward scan over the input."""

    line_starts: array
    eof_sentinel: int
    block_size: int

    @property
    def total_lines(self) -> int:
        return len(self.line_starts)
