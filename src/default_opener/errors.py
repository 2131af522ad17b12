from __future__ import annotations


class InvalidTargetError(TypeError):
    pass


class OpenError(RuntimeError):
    pass


class StderrOutputError(OpenError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class ExitCodeError(OpenError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Exited with code {code}")
        self.code = code
