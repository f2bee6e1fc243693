"""PasswordHasher Port."""

from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    def hash(self, raw_password: str) -> str:
        ...

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        """해시가 손상되었거나 일치하지 않으면 False."""
        ...
