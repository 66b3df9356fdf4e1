from __future__ import annotations
import re
from typing import Optional

from docbr.models import PixKeyType, ValidationResult
from docbr.utils.text import clean_document, only_digits
from .contact import PHONE_ERROR, is_valid_email, is_valid_phone
from .documents import validate_cnpj, validate_cpf
from .formatters import format_cnpj_input, format_cpf_input, format_phone_input

_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


def _key_type(key_type: PixKeyType | str) -> PixKeyType:
    return key_type if isinstance(key_type, PixKeyType) else PixKeyType(str(key_type).upper())


def format_pix_key_input(value: Optional[str], key_type: PixKeyType | str) -> str:
    """Máscara da chave enquanto digita, conforme o tipo escolhido."""
    kt = _key_type(key_type)
    if kt is PixKeyType.CPF:
        return format_cpf_input(value)
    if kt is PixKeyType.CNPJ:
        return format_cnpj_input(value)
    if kt is PixKeyType.PHONE:
        return format_phone_input(value)
    return value or ""


def check_pix_key_input(value: Optional[str], key_type: PixKeyType | str) -> Optional[ValidationResult]:
    """
    Checagem em tempo real (a cada tecla). Retorna None com campo vazio;
    valor ainda incompleto vira erro "incompleto" em vez do erro de tamanho.
    """
    if not value or not value.strip():
        return None
    kt = _key_type(key_type)

    if kt is PixKeyType.CPF:
        n = only_digits(value)
        if len(n) < 11:
            return ValidationResult.fail("CPF incompleto")
        return validate_cpf(n)

    if kt is PixKeyType.CNPJ:
        clean = clean_document(value)
        if len(clean) < 14:
            return ValidationResult.fail("CNPJ incompleto")
        return validate_cnpj(clean)

    if kt is PixKeyType.PHONE:
        n = only_digits(value)
        if len(n) < 10:
            return ValidationResult.fail("Telefone incompleto")
        if len(n) > 11:
            return ValidationResult.fail("Telefone inválido")
        return ValidationResult.ok(format_phone_input(n))

    if kt is PixKeyType.EMAIL:
        if not is_valid_email(value):
            return ValidationResult.fail("E-mail inválido")
        return ValidationResult.ok(value.strip())

    if len(value) < 10:
        return ValidationResult.fail("Chave aleatória muito curta")
    return ValidationResult.ok(value)


def validate_pix_key(value: Optional[str], key_type: PixKeyType | str) -> ValidationResult:
    """Validação final da chave PIX (no envio do saque)."""
    if not value or not value.strip():
        return ValidationResult.fail("Chave PIX é obrigatória")
    kt = _key_type(key_type)

    if kt is PixKeyType.CPF:
        return validate_cpf(value)
    if kt is PixKeyType.CNPJ:
        return validate_cnpj(value)
    if kt is PixKeyType.EMAIL:
        if not is_valid_email(value):
            return ValidationResult.fail("E-mail inválido")
        return ValidationResult.ok(value.strip())
    if kt is PixKeyType.PHONE:
        if not is_valid_phone(value):
            return ValidationResult.fail(PHONE_ERROR)
        return ValidationResult.ok(format_phone_input(value))

    # chave aleatória: UUID, ou ao menos 32 caracteres
    if len(value) < 10 or (not _UUID_RE.match(value) and len(value) < 32):
        return ValidationResult.fail("Chave aleatória inválida")
    return ValidationResult.ok(value)
