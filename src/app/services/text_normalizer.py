"""Normalização de texto para comparação de keywords.

Minúsculas, sem acentos, sem símbolos. Comportamento fixo, sem locale.
"""

from __future__ import annotations

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9\s]")


def normalize(text: str | None) -> str:
    """Reduz o texto à forma canônica usada pelo matcher.

    >>> normalize("Hóla  Buenós!")
    'hola buenos'

    Sequências de espaço em branco viram um único espaço, então a saída
    contém apenas [a-z0-9 ]. Idempotente: normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    no_marks = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(_DISALLOWED.sub("", no_marks).split())
