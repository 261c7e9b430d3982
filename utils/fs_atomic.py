from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Callable, Union

Pathish = Union[str, Path]

__all__ = ["fsync_dir", "atomic_write_text"]


def fsync_dir(dir_path: Pathish) -> None:
    """
    Fsync a directory so a completed rename survives a crash.
    No-op if the directory doesn't exist.
    """
    d = Path(dir_path)
    if not d.exists():
        return
    fd = os.open(str(d), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def _write_tmp_and_replace(dst_path: Path, write_fn: Callable) -> None:
    """
    Internal helper:
      - create a temp file next to dst
      - write via write_fn(fileobj)
      - fsync temp
      - os.replace -> dst
      - fsync directory
    """
    dst_dir = dst_path.parent
    dst_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = dst_dir / f".{dst_path.name}.tmp-{os.getpid()}-{uuid.uuid4().hex[:8]}"

    try:
        with open(tmp_path, "wb") as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, dst_path)
        fsync_dir(dst_dir)
    except BaseException:
        # The original file, if any, is untouched; only drop our temp file
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def atomic_write_text(dst: Pathish, text: str, encoding: str = "utf-8") -> None:
    """Atomically replace dst with text."""
    data = text.encode(encoding)
    _write_tmp_and_replace(Path(dst), lambda fobj: fobj.write(data))
