from __future__ import annotations

import logging
import subprocess
import threading
from collections.abc import Mapping, Sequence
from typing import IO, Protocol

from default_opener.commands import build_command
from default_opener.errors import ExitCodeError, InvalidTargetError, StderrOutputError
from default_opener.options import OpenOptions, coerce_options
from default_opener.platforms import PlatformContext, PlatformFamily, detect_platform

log = logging.getLogger(__name__)


class Spawner(Protocol):
    def __call__(
        self, program: str, args: Sequence[str], *, raw_arguments: bool = False
    ) -> subprocess.Popen: ...


def spawn_process(
    program: str, args: Sequence[str], *, raw_arguments: bool = False
) -> subprocess.Popen:
    """Start ``program`` with all three standard streams piped.

    With ``raw_arguments`` the command line is handed over as a single string,
    so quoting already present in ``args`` reaches the program unchanged.
    """
    command: str | list[str]
    if raw_arguments:
        command = " ".join([program, *args])
    else:
        command = [program, *args]
    return subprocess.Popen(
        command,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )


def _discard(stream: IO[bytes]) -> None:
    try:
        stream.read()
    except (OSError, ValueError):
        return


def _drain_stdout(process: subprocess.Popen) -> None:
    # stdin and stderr stay open; the caller owns the handle.
    if process.stdout is None:
        return
    threading.Thread(target=_discard, args=(process.stdout,), daemon=True).start()


def _wait_for_exit(process: subprocess.Popen) -> None:
    _, stderr = process.communicate()
    if stderr:
        raise StderrOutputError(stderr.decode("utf-8", errors="replace"))
    if process.returncode and process.returncode > 0:
        raise ExitCodeError(process.returncode)


def open_target(
    target: str,
    options: OpenOptions | Mapping[str, object] | None = None,
    *,
    context: PlatformContext | None = None,
    spawn: Spawner = spawn_process,
) -> subprocess.Popen:
    if not isinstance(target, str):
        raise InvalidTargetError("Expected a target")

    opts = coerce_options(options)
    ctx = context or detect_platform()
    command = build_command(target, opts, ctx)

    process = spawn(
        command.program,
        command.args,
        raw_arguments=ctx.family is PlatformFamily.WINDOWS,
    )
    log.debug("spawned %s (pid %s)", command.program, process.pid)

    if opts.wait:
        _wait_for_exit(process)
    else:
        _drain_stdout(process)
    return process
