from __future__ import annotations

import io
from collections.abc import Sequence


class FakeProcess:
    def __init__(self, returncode: int = 0, stderr: bytes = b"", stdout: bytes = b"") -> None:
        self.pid = 4242
        self.returncode: int | None = None
        self.stdout = io.BytesIO(stdout)
        self.stderr = io.BytesIO(stderr)
        self._exit_code = returncode

    def communicate(self) -> tuple[bytes, bytes]:
        self.returncode = self._exit_code
        return self.stdout.read(), self.stderr.read()


class FakeSpawner:
    def __init__(self, process: FakeProcess | None = None) -> None:
        self.process = process or FakeProcess()
        self.calls: list[tuple[str, list[str], bool]] = []

    def __call__(self, program: str, args: Sequence[str], *, raw_arguments: bool = False) -> FakeProcess:
        self.calls.append((program, list(args), raw_arguments))
        return self.process
