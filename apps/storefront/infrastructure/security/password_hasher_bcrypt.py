"""Bcrypt Password Hasher.

PasswordHasher 포트의 구현체입니다.
"""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 12
# bcrypt는 앞 72바이트만 사용합니다.
MAX_PASSWORD_BYTES = 72


def _encode(raw_password: str) -> bytes:
    return raw_password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, raw_password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(raw_password), salt).decode("utf-8")

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        if not raw_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(_encode(raw_password), hashed_password.encode("utf-8"))
        except ValueError:
            # 손상된 해시
            return False
