"""MessageCatalog 테스트."""

import json
from pathlib import Path

import pytest

from apps.storefront.application.common.messages import (
    Message,
    MessageCatalog,
    parse_accept_language,
)

GREETING = Message("api.greeting", "hello")


class TestMessageCatalog:
    def test_falls_back_to_default_text(self) -> None:
        assert MessageCatalog().render(GREETING, "sr") == "hello"

    def test_locale_override(self) -> None:
        catalog = MessageCatalog({"SR": {"api.greeting": "zdravo"}})

        assert catalog.render(GREETING, "sr") == "zdravo"
        assert catalog.render(GREETING, "de") == "hello"

    def test_default_locale_used_when_request_locale_missing(self) -> None:
        catalog = MessageCatalog({"sr": {"api.greeting": "zdravo"}}, default_locale="sr")

        assert catalog.render(GREETING, None) == "zdravo"
        assert catalog.render(GREETING, "fr") == "zdravo"

    def test_read_only(self) -> None:
        catalog = MessageCatalog({"sr": {"api.greeting": "zdravo"}})

        with pytest.raises(TypeError):
            catalog._translations["sr"]["api.greeting"] = "changed"  # type: ignore[index]

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.json"
        path.write_text(json.dumps({"sr": {"api.greeting": "zdravo"}}), encoding="utf-8")

        catalog = MessageCatalog.from_file(path)

        assert catalog.locales == ("sr",)
        assert catalog.render(GREETING, "sr") == "zdravo"

    def test_from_file_rejects_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "messages.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError):
            MessageCatalog.from_file(path)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("sr-Latn-RS,sr;q=0.9,en;q=0.8", "sr"),
        ("EN-us", "en"),
        ("*", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_accept_language(header, expected) -> None:
    assert parse_accept_language(header) == expected
