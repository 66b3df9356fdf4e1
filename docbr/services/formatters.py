from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from docbr.utils.text import DIGITS, LETTERS, clean_document, has_letter, keep, only_digits

_ALNUM = DIGITS | LETTERS
_CRECI_SUFFIX = LETTERS | {"-"}

_CPF_RE = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")
_CNPJ_RE = re.compile(r"(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})")
_CEP_RE = re.compile(r"(\d{5})(\d{3})")

# ---------------- Máscara final (valor completo) ----------------

def format_cpf(cpf: Optional[str]) -> str:
    """000.000.000-00. Com menos de 11 dígitos devolve só os dígitos."""
    return _CPF_RE.sub(r"\1.\2.\3-\4", only_digits(cpf), count=1)

def format_cnpj(cnpj: Optional[str]) -> str:
    """00.000.000/0000-00 (somente numérico)."""
    return _CNPJ_RE.sub(r"\1.\2.\3/\4-\5", only_digits(cnpj), count=1)

def format_alphanumeric_cnpj(cnpj: Optional[str]) -> str:
    """
    XX.XXX.XXX/XXXX-XX preservando letras.
    Se não tiver 14 caracteres após a limpeza, devolve a entrada como veio.
    """
    clean = clean_document(cnpj)
    if len(clean) != 14:
        return cnpj or ""
    return f"{clean[0:2]}.{clean[2:5]}.{clean[5:8]}/{clean[8:12]}-{clean[12:14]}"

def format_cep(cep: Optional[str]) -> str:
    return _CEP_RE.sub(r"\1-\2", only_digits(cep), count=1)

# ---------------- Máscara incremental (digitação) ----------------

def _mask_cnpj(s: str) -> str:
    if len(s) <= 2:  return s
    if len(s) <= 5:  return f"{s[:2]}.{s[2:]}"
    if len(s) <= 8:  return f"{s[:2]}.{s[2:5]}.{s[5:]}"
    if len(s) <= 12: return f"{s[:2]}.{s[2:5]}.{s[5:8]}/{s[8:]}"
    return f"{s[:2]}.{s[2:5]}.{s[5:8]}/{s[8:12]}-{s[12:]}"

def format_cpf_input(value: Optional[str]) -> str:
    d = only_digits(value)[:11]
    if len(d) <= 3:  return d
    if len(d) <= 6:  return f"{d[:3]}.{d[3:]}"
    if len(d) <= 9:  return f"{d[:3]}.{d[3:6]}.{d[6:]}"
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

def format_cnpj_input(value: Optional[str]) -> str:
    """
    Máscara de CNPJ enquanto digita, numérico ou alfanumérico (2026).
    Com letras: base (12 primeiros) aceita A-Z/0-9; os 2 DVs só aceitam dígitos.
    """
    clean = clean_document(value)[:14]
    if has_letter(clean):
        combined = keep(clean[:12], _ALNUM) + keep(clean[12:14], DIGITS)
    else:
        combined = only_digits(clean)
    return _mask_cnpj(combined)

def format_document_input(value: Optional[str]) -> str:
    """
    Detecta CPF/CNPJ enquanto digita: letra -> CNPJ alfanumérico;
    até 11 dígitos -> CPF; acima disso -> CNPJ.
    """
    clean = clean_document(value)
    if has_letter(clean):
        return format_cnpj_input(value)
    if len(only_digits(clean)) <= 11:
        return format_cpf_input(value)
    return format_cnpj_input(value)

def format_cep_input(value: Optional[str]) -> str:
    d = only_digits(value)
    if len(d) <= 5: return d
    return _CEP_RE.sub(r"\1-\2", d, count=1)

def is_valid_cep_format(cep: Optional[str]) -> bool:
    return len(only_digits(cep)) == 8

def format_creci_input(value: Optional[str]) -> str:
    """
    CRECI no formato número/UF-sufixo (ex.: 12345/SP, 12345/SP-J).
    Número: até 10 dígitos. Sufixo: só A-Z e '-', até 4 caracteres.
    """
    if not value:
        return ""
    parts = value.upper().split("/")
    if len(parts) == 1:
        return only_digits(parts[0])[:10]
    number = only_digits(parts[0])[:10]
    suffix = keep("/".join(parts[1:]), _CRECI_SUFFIX)[:4]
    return f"{number}/{suffix}"

def format_phone_input(value: Optional[str]) -> str:
    """(00) 0000-0000 para fixo, (00) 00000-0000 para celular."""
    d = only_digits(value)
    if len(d) <= 2:  return d
    if len(d) <= 6:  return f"({d[:2]}) {d[2:]}"
    if len(d) <= 10: return f"({d[:2]}) {d[2:6]}-{d[6:]}"
    return f"({d[:2]}) {d[2:7]}-{d[7:11]}"

# ---------------- Moeda ----------------

def format_brl(value) -> str:
    """R$ 1.234,56 (pt-BR). None vira '-'."""
    if value is None or value == "":
        return "-"
    try:
        q = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return "-"
    sign = "-" if q < 0 else ""
    s = f"{abs(q):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"{sign}R$ {s}"
