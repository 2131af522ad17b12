from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from urllib.parse import quote

# Characters encodeURI leaves alone besides letters, digits and "-_.~".
URI_SAFE_CHARS = ";,/?:@&=+$!*'()#"


@dataclass(frozen=True)
class OpenOptions:
    wait: bool = False
    background: bool = False
    app: str | Sequence[str] | None = None
    url: bool = False

    @property
    def app_program(self) -> str | None:
        if self.app is None or isinstance(self.app, str):
            return self.app or None
        if not self.app:
            return None
        return self.app[0]

    @property
    def app_arguments(self) -> list[str]:
        if self.app is None or isinstance(self.app, str):
            return []
        return list(self.app[1:])


def coerce_options(options: OpenOptions | Mapping[str, object] | None) -> OpenOptions:
    """Merge caller options over the defaults."""
    if options is None:
        return OpenOptions()
    if isinstance(options, OpenOptions):
        return options

    known = {field.name for field in fields(OpenOptions)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise TypeError(f"Unknown open option(s): {', '.join(unknown)}")
    return replace(OpenOptions(), **dict(options))


def encode_uri(target: str) -> str:
    return quote(target, safe=URI_SAFE_CHARS)
