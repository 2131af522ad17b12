from __future__ import annotations

import logging
from dataclasses import dataclass

from default_opener.fallback import resolve_fallback_opener
from default_opener.options import OpenOptions, encode_uri
from default_opener.platforms import PlatformContext, PlatformFamily

log = logging.getLogger(__name__)

WSL_VIEWER = "wslview"
# Quoted empty window title; `start` would otherwise take a quoted target as the title.
WINDOWS_START_PREFIX = ("/c", "start", '""')


@dataclass(frozen=True)
class LaunchCommand:
    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


def escape_windows_ampersands(target: str) -> str:
    return target.replace("&", '"&"')


def _build_macos(target: str, options: OpenOptions, context: PlatformContext) -> LaunchCommand:
    args: list[str] = []
    if options.wait:
        args.append("--wait-apps")
    if options.background:
        args.append("--background")
    if options.app_program:
        args.extend(["-a", options.app_program])
    args.append(target)
    # Everything after --args goes to the app untouched by `open`.
    if options.app_arguments:
        args.extend(["--args", *options.app_arguments])
    return LaunchCommand("open", tuple(args))


def _build_windows(target: str, options: OpenOptions, context: PlatformContext) -> LaunchCommand:
    args = list(WINDOWS_START_PREFIX)
    if options.wait:
        args.append("/wait")
    if options.app_program:
        args.append(options.app_program)
    args.extend(options.app_arguments)
    args.append(escape_windows_ampersands(target))
    return LaunchCommand("cmd", tuple(args))


def _build_unix(target: str, options: OpenOptions, context: PlatformContext) -> LaunchCommand:
    if options.app_program:
        program = options.app_program
    elif context.wsl:
        program = WSL_VIEWER
    else:
        program = resolve_fallback_opener(context.source_dir)
    return LaunchCommand(program, (*options.app_arguments, target))


_BUILDERS = {
    PlatformFamily.MACOS: _build_macos,
    PlatformFamily.WINDOWS: _build_windows,
    PlatformFamily.UNIX: _build_unix,
}


def build_command(target: str, options: OpenOptions, context: PlatformContext) -> LaunchCommand:
    if options.url:
        target = encode_uri(target)
    command = _BUILDERS[context.family](target, options, context)
    log.debug("launch command for %s: %s", context.family.value, command.argv)
    return command
