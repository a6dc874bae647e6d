"""Output target naming for workers."""

import os

# Every worker may write here at once.
NULL_SINK = os.devnull


def output_target(stem: str, index: int, thread_count: int, extension: str = "") -> str:
    """
    Name the file worker ``index`` writes to.

    The index is zero-padded to the number of digits in ``thread_count`` so
    that outputs sort in partition order: with 10 workers, worker 3 of stem
    ``out-`` writes ``out-03``. The null sink is shared and never decorated.
    """
    if stem == NULL_SINK:
        return stem

    width = len(str(thread_count))
    return f"{stem}{index:0{width}d}{extension}"
