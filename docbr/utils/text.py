from __future__ import annotations
import re
from typing import Optional

DIGITS = frozenset("0123456789")
LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
# pontuação removida de CNPJ/documentos (além de espaços em branco)
DOCUMENT_PUNCTUATION = frozenset(".-/")

_NON_DIGITS = re.compile(r"[^0-9]")

def only_digits(s: Optional[str]) -> str:
    """Somente dígitos ASCII 0-9 (remove máscara, espaços e letras)."""
    return _NON_DIGITS.sub("", s or "")

def clean_document(s: Optional[str]) -> str:
    """
    Remove '.', '-', '/' e espaços e converte para maiúsculas.
    Mantém letras (CNPJ alfanumérico) e qualquer outro caractere.
    """
    return "".join(ch for ch in (s or "") if ch not in DOCUMENT_PUNCTUATION and not ch.isspace()).upper()

def has_letter(s: Optional[str]) -> bool:
    return any(ch in LETTERS for ch in (s or ""))

def is_digits(s: Optional[str]) -> bool:
    """True se não vazio e composto só por 0-9 (str.isdigit aceita '²', aqui não)."""
    return bool(s) and all(ch in DIGITS for ch in s)

def is_alphanumeric(s: Optional[str]) -> bool:
    return bool(s) and all(ch in DIGITS or ch in LETTERS for ch in s)

def keep(s: Optional[str], allowed: frozenset) -> str:
    return "".join(ch for ch in (s or "") if ch in allowed)
