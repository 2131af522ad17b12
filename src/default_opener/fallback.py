from __future__ import annotations

import logging
import os
import stat
import sys
from pathlib import Path
from urllib.parse import unquote, urlsplit

log = logging.getLogger(__name__)

SYSTEM_XDG_OPEN = "xdg-open"
LOCAL_XDG_OPEN_NAME = "xdg-open"


def get_dir(location: str) -> str:
    """Return the directory part of a file path or URL.

    ``file://`` URLs are reduced to their path; other URLs keep their scheme
    and host, so only the last path segment is dropped.
    """
    parts = urlsplit(location)
    target = unquote(parts.path) if parts.scheme == "file" else location
    head, sep, _ = target.rpartition("/")
    return head if sep else ""


def own_source_dir() -> str:
    # Frozen bundles have no usable package directory on disk.
    if getattr(sys, "frozen", False):
        return ""
    return get_dir(Path(__file__).resolve().as_posix())


def is_bundled(source_dir: str) -> bool:
    if not source_dir:
        return True
    path = Path(source_dir)
    return path == Path(path.anchor)


def local_xdg_open_path(source_dir: str) -> str:
    return os.path.join(source_dir, LOCAL_XDG_OPEN_NAME)


def is_file(path: str) -> bool:
    try:
        return stat.S_ISREG(os.stat(path).st_mode)
    except (FileNotFoundError, NotADirectoryError):
        return False


def resolve_fallback_opener(source_dir: str) -> str:
    bundled = is_bundled(source_dir)
    local_path = local_xdg_open_path(source_dir)
    if bundled or not is_file(local_path):
        log.debug("using system %s (bundled=%s)", SYSTEM_XDG_OPEN, bundled)
        return SYSTEM_XDG_OPEN
    log.debug("using bundled opener at %s", local_path)
    return local_path
