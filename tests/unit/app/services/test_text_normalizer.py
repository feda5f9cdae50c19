"""Testes da normalização de texto usada pelo matcher."""

from __future__ import annotations

import re

import pytest

from app.services.text_normalizer import normalize

_ALLOWED = re.compile(r"[a-z0-9 ]*")


def test_strips_accents_symbols_and_case() -> None:
    assert normalize("Hóla  Buenós!") == "hola buenos"


def test_handles_enye_and_dieresis() -> None:
    assert normalize("Año PINGÜINO") == "ano pinguino"


def test_none_and_empty_return_empty() -> None:
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("¡¿?!") == ""


def test_trims_and_collapses_whitespace() -> None:
    assert normalize("\t  hola\n\nmundo  ") == "hola mundo"


def test_keeps_digits() -> None:
    assert normalize("Pedido #123-A") == "pedido 123a"


@pytest.mark.parametrize(
    "text",
    [
        "Hóla  Buenós!",
        "  ÉXITO total ya ",
        "emoji 🎉 fiesta",
        "İstanbul ß straße",
        "ＦＵＬＬ ｗｉｄｔｈ",
        "",
    ],
)
def test_idempotent_and_restricted_alphabet(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once
    assert _ALLOWED.fullmatch(once)
