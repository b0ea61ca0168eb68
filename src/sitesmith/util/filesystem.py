"""
Filesystem helpers used when emitted pages are written to disk.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from filelock import FileLock, Timeout

logger = logging.getLogger(__name__)

LOCK_TIMEOUT_SECONDS = 30.0


def ensure_directory(path: Path | str) -> Path:
    """
    Create ``path`` (and parents) if needed and return it resolved.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def _lock_for(target: Path, timeout: float) -> FileLock:
    return FileLock(str(target.with_name(f".{target.name}.lock")), timeout=timeout)


def _replace_atomically(target: Path, content: str, encoding: str) -> None:
    handle = tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
        delete=False,
    )
    staged = Path(handle.name)
    try:
        with handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(staged, target)
    except BaseException:
        staged.unlink(missing_ok=True)
        raise


def write_text_file(
    path: Path | str,
    content: str,
    encoding: str = "utf-8",
    *,
    lock: bool = True,
    timeout: Optional[float] = None,
) -> Path:
    """
    Write ``content`` to ``path`` atomically, creating parent directories.

    When ``lock`` is set a sibling ``.lock`` file serialises concurrent
    writers of the same page; a lock that cannot be acquired in time is
    reported as an ``OSError`` so batch callers can record it per page.
    """
    target = Path(path).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    if not lock:
        _replace_atomically(target, content, encoding)
        return target
    try:
        with _lock_for(target, LOCK_TIMEOUT_SECONDS if timeout is None else timeout):
            _replace_atomically(target, content, encoding)
    except Timeout as exc:
        raise OSError(f"Timed out waiting for lock on {target}") from exc
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target
