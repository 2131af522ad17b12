from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from enum import Enum

from default_opener.fallback import own_source_dir


class PlatformFamily(Enum):
    MACOS = "macos"
    WINDOWS = "windows"
    UNIX = "unix"


@dataclass(frozen=True)
class PlatformContext:
    family: PlatformFamily
    wsl: bool = False
    source_dir: str = ""


def platform_family(sys_platform: str) -> PlatformFamily:
    if sys_platform == "darwin":
        return PlatformFamily.MACOS
    if sys_platform == "win32":
        return PlatformFamily.WINDOWS
    return PlatformFamily.UNIX


def detect_wsl(sys_platform: str | None = None) -> bool:
    """Detect Windows Subsystem for Linux via the kernel release string."""
    if (sys_platform or sys.platform) != "linux":
        return False
    if "microsoft" in platform.release().lower():
        return True
    try:
        with open("/proc/version", encoding="utf-8") as fh:
            return "microsoft" in fh.read().lower()
    except OSError:
        return False


def detect_platform() -> PlatformContext:
    family = platform_family(sys.platform)
    return PlatformContext(
        family=family,
        wsl=family is PlatformFamily.UNIX and detect_wsl(),
        source_dir=own_source_dir(),
    )
