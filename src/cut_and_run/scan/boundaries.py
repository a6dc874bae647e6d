"""Single forward scan that locates line starts in the input file."""

import logging
import os
from array import array

from cut_and_run.errors import InputUnavailableError, ResourceExhaustedError
from cut_and_run.scan.plan import lines_per_worker, plan_partitions
from cut_and_run.scan.types import (
    BOUNDARY_BYTE,
    BUFFER_SIZE,
    OFFSET_TYPECODE,
    LineIndex,
    PartitionPlan,
)

logger = logging.getLogger(__name__)


def preferred_block_size(fd: int) -> int:
    """Filesystem's preferred I/O size for ``fd``, or BUFFER_SIZE if unknown."""
    block_size = getattr(os.fstat(fd), "st_blksize", 0)
    return block_size if block_size > 0 else BUFFER_SIZE


def scan_line_starts(input_path: str) -> LineIndex:
    """
    Record the absolute offset of every line start in one pass.

    Offset 0 is recorded before reading; each boundary byte then adds the
    offset of the byte that follows it. The scanning handle is closed before
    returning, so workers must open their own.
    """
    try:
        handle = open(input_path, "rb", buffering=0)  # noqa: SIM115
    except OSError as exc:
        raise InputUnavailableError(f"Cannot open {input_path}: {exc.strerror}") from exc

    with handle:
        block_size = preferred_block_size(handle.fileno())
        logger.info("Block size = %d", block_size)

        try:
            line_starts = array(OFFSET_TYPECODE, [0])
            buffer = bytearray(block_size)
        except MemoryError as exc:
            raise ResourceExhaustedError("Cannot allocate scan buffer") from exc

        # Tracking the position is cheaper than asking the handle for it.
        file_position = 0
        try:
            while bytes_read := handle.readinto(buffer):
                pos = buffer.find(BOUNDARY_BYTE, 0, bytes_read)
                while pos != -1:
                    line_starts.append(file_position + pos + 1)
                    pos = buffer.find(BOUNDARY_BYTE, pos + 1, bytes_read)
                file_position += bytes_read
        except MemoryError as exc:
            raise ResourceExhaustedError(
                f"Cannot grow line index beyond {len(line_starts)} entries"
            ) from exc
        except OSError as exc:
            raise InputUnavailableError(f"Cannot read {input_path}: {exc.strerror}") from exc

    return LineIndex(
        line_starts=line_starts,
        eof_sentinel=file_position + 1,
        block_size=block_size,
    )


def find_partition_plan(input_path: str, thread_count: int) -> PartitionPlan:
    """Scan ``input_path`` and split its lines into ``thread_count`` ranges."""
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")

    index = scan_line_starts(input_path)
    logger.info(
        "Lines per thread: %d", lines_per_worker(index.total_lines, thread_count)
    )
    return plan_partitions(index.line_starts, index.eof_sentinel, thread_count)
