"""Byte-exact streaming of one file range into a sink."""

from typing import BinaryIO

from cut_and_run.dispatch.types import CopyStats


def copy_range(
    source: BinaryIO,
    sink: BinaryIO,
    start: int,
    length: int,
    buffer: bytearray,
) -> CopyStats:
    """
    Copy ``length`` bytes starting at ``start`` from ``source`` to ``sink``.

    Each read asks for at most the bytes left in the range, and only the
    bytes the read actually returned are forwarded. The copy ends early at
    end of file (the last range is bounded by a sentinel one past EOF) or
    when the sink's reader has gone away.
    """
    stats = CopyStats()
    source.seek(start)
    remaining = length

    with memoryview(buffer) as view:
        while remaining > 0:
            bytes_read = source.readinto(view[: min(len(view), remaining)])
            if not bytes_read:
                break

            try:
                sink.write(view[:bytes_read])
            except BrokenPipeError:
                stats.reader_closed = True
                break

            remaining -= bytes_read
            stats.bytes_sent += bytes_read

    return stats
