from __future__ import annotations
import re
from typing import Optional

from docbr.models import ValidationResult
from docbr.utils.text import only_digits
from .formatters import format_phone_input

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PHONE_ERROR = "Telefone deve ter 10 ou 11 dígitos (com DDD)"

def is_valid_email(email: Optional[str]) -> bool:
    return bool(_EMAIL_RE.match((email or "").strip()))

def is_valid_phone(phone: Optional[str]) -> bool:
    """Fixo (10) ou celular (11), contando o DDD."""
    return len(only_digits(phone)) in (10, 11)

def validate_phone(phone: Optional[str]) -> ValidationResult:
    if not is_valid_phone(phone):
        return ValidationResult.fail(PHONE_ERROR)
    return ValidationResult.ok(format_phone_input(phone))
