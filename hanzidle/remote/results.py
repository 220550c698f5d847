"""
Result type for calls to the remote pinyin/hint/random-word service.

Either-like: a call either succeeded with `data` or failed with a `kind`
that tells timeouts apart from bad payloads. The resolver collapses any
failure to "no result" only at the point where it decides to fall back.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

TIMEOUT = "timeout"
NETWORK = "network"
HTTP_STATUS = "http_status"
MALFORMED = "malformed"


@dataclass(frozen=True)
class RemoteResult:
    success: bool
    data: Any = None
    kind: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: Any) -> RemoteResult:
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, kind: str, message: str = "") -> RemoteResult:
        return cls(success=False, kind=kind, message=message)

    def flat_map(self, f: Callable[[Any], RemoteResult]) -> RemoteResult:
        """Chain a parsing step that may itself fail."""
        if self.success:
            return f(self.data)
        return self

    def or_none(self) -> Any:
        return self.data if self.success else None
