from __future__ import annotations

import argparse
import logging
import sys

from prompt_toolkit import prompt

from default_opener.actions import open_target
from default_opener.errors import ExitCodeError, StderrOutputError
from default_opener.options import OpenOptions


def _split_app_args(argv: list[str]) -> tuple[list[str], list[str]]:
    if "--" not in argv:
        return argv, []
    idx = argv.index("--")
    return argv[:idx], argv[idx + 1 :]


def parse_args(argv: list[str]) -> argparse.Namespace:
    own, app_args = _split_app_args(argv)
    parser = argparse.ArgumentParser(
        description="Open a file or URL with the default application",
        epilog="Arguments after -- are passed to the app given with --app.",
    )
    parser.add_argument("target", nargs="?", default="", help="file path or URL to open")
    parser.add_argument("--wait", action="store_true", help="wait for the app to exit")
    parser.add_argument("--background", action="store_true", help="do not bring the app to the foreground (macOS)")
    parser.add_argument("--url", action="store_true", help="URL-encode the target")
    parser.add_argument("--app", default=None, help="application to open the target with")
    parser.add_argument("--verbose", action="store_true", help="log the launch command")
    args = parser.parse_args(own)
    if app_args and not args.app:
        parser.error("arguments after -- require --app")
    args.app_args = app_args
    return args


def build_options(args: argparse.Namespace) -> OpenOptions:
    app: str | list[str] | None = args.app
    if args.app and args.app_args:
        app = [args.app, *args.app_args]
    return OpenOptions(wait=args.wait, background=args.background, app=app, url=args.url)


def run(argv: list[str]) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    target = args.target.strip()
    if not target:
        try:
            target = prompt("Target> ").strip()
        except (EOFError, KeyboardInterrupt):
            return 0
    if not target:
        return 0

    try:
        open_target(target, build_options(args))
    except ExitCodeError as exc:
        print(str(exc), file=sys.stderr)
        return exc.code
    except StderrOutputError as exc:
        print(exc.text.rstrip(), file=sys.stderr)
        return 3
    except OSError as exc:
        print(f"Launch failed: {exc}", file=sys.stderr)
        return 2
    return 0


def main() -> None:
    raise SystemExit(run(sys.argv[1:]))
