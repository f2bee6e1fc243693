"""Message Catalog.

사용자에게 노출되는 메시지를 ID로 관리합니다.
시작 시 한 번 만들어지고 이후에는 읽기 전용으로 참조만 전달됩니다.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class Message:
    """메시지 ID와 기본(영문) 문구."""

    id: str
    default: str


class MessageCatalog:
    """로케일별 번역 테이블 (읽기 전용).

    Example:
        catalog = MessageCatalog({"sr": {"api.invalid_token": "..."}})
        catalog.render(MSG_INVALID_TOKEN, "sr")
    """

    __slots__ = ("_translations", "_default_locale")

    def __init__(
        self,
        translations: Mapping[str, Mapping[str, str]] | None = None,
        *,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        frozen = {
            locale.lower(): MappingProxyType(dict(messages))
            for locale, messages in (translations or {}).items()
        }
        self._translations: Mapping[str, Mapping[str, str]] = MappingProxyType(frozen)
        self._default_locale = default_locale.lower()

    @classmethod
    def from_file(cls, path: str | Path, *, default_locale: str = DEFAULT_LOCALE) -> "MessageCatalog":
        """{"<locale>": {"<message id>": "<text>"}} 형태의 JSON 파일을 읽습니다."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Message catalog must be a JSON object: {path}")
        logger.info(
            "Message catalog loaded",
            extra={"path": str(path), "locales": sorted(data)},
        )
        return cls(data, default_locale=default_locale)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._translations)

    def render(self, message: Message, locale: str | None = None) -> str:
        """요청 로케일 → 기본 로케일 → 메시지 기본 문구 순으로 찾습니다."""
        for candidate in (locale, self._default_locale):
            if not candidate:
                continue
            table = self._translations.get(candidate.lower())
            if table and message.id in table:
                return table[message.id]
        return message.default


def parse_accept_language(header: str | None) -> str | None:
    """Accept-Language 헤더에서 첫 번째 언어 태그의 주 언어만 추출합니다."""
    if not header:
        return None
    first = header.split(",")[0].split(";")[0].strip()
    if not first or first == "*":
        return None
    return first.split("-")[0].lower()
