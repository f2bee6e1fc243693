"""Address DTOs."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class AddressInput:
    line_1: str
    city: str
    country: str
    zip: str
    line_2: str | None = None
    state: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class AddressPatch:
    line_1: str | None = None
    line_2: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    zip: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None

    def changes(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}
