import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator


class _Tee:
    # write-through to every stream
    def __init__(self, *streams: IO[str]):
        self.streams = streams

    def write(self, data: str) -> None:
        for s in self.streams:
            s.write(data)
            s.flush()

    def flush(self) -> None:
        for s in self.streams:
            s.flush()


@contextmanager
def tee_stdout(log_path: str) -> Iterator[IO[str]]:
    """
    Duplicate everything printed inside the block into `log_path`.

    The log file is truncated on entry; stdout is restored and the file
    closed on exit, even if the block raises.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    orig_stdout = sys.stdout
    with open(log_path, "w", encoding="utf-8") as log_file:
        sys.stdout = _Tee(orig_stdout, log_file)
        try:
            yield log_file
        finally:
            sys.stdout = orig_stdout
