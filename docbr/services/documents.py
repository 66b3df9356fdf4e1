from __future__ import annotations
import re
from typing import Optional

from docbr.models import CNPJScheme, DocumentType, ValidationResult
from docbr.utils.logs import get_logger
from docbr.utils.text import clean_document, has_letter, is_alphanumeric, only_digits
from .checksum import cnpj_check_digits, is_valid_cpf_checksum
from .detector import CNPJ_LENGTH, CPF_LENGTH, detect_cnpj_scheme
from .formatters import format_alphanumeric_cnpj, format_cnpj, format_cpf

log = get_logger(__name__)

_CNPJ_DV_RE = re.compile(r"^[0-9]{2}$")

# ---------------- CPF ----------------

def validate_cpf(cpf: Optional[str]) -> ValidationResult:
    """
    Valida CPF (com ou sem máscara): 11 dígitos, não repetidos, DVs corretos.
    """
    n = only_digits(cpf)
    kind = DocumentType.CPF
    if len(n) != CPF_LENGTH:
        return ValidationResult.fail("CPF deve ter 11 dígitos", document_type=kind)
    if n == n[0] * CPF_LENGTH:
        return ValidationResult.fail("CPF inválido (sequência inválida)", document_type=kind)
    if not is_valid_cpf_checksum(n):
        return ValidationResult.fail("CPF inválido (dígitos verificadores incorretos)", document_type=kind)
    return ValidationResult.ok(format_cpf(n), document_type=kind)

# ---------------- CNPJ ----------------

def _validate_legacy_cnpj(cnpj: str) -> ValidationResult:
    """CNPJ tradicional, somente números (até jul/2026)."""
    n = only_digits(cnpj)
    kind = DocumentType.CNPJ
    if len(n) != CNPJ_LENGTH:
        return ValidationResult.fail("CNPJ deve ter 14 dígitos", document_type=kind)
    if n == n[0] * CNPJ_LENGTH:
        return ValidationResult.fail("CNPJ inválido (sequência inválida)", document_type=kind)
    d1, d2 = cnpj_check_digits(n[:12])
    if n[12:] != f"{d1}{d2}":
        return ValidationResult.fail("CNPJ inválido (dígitos verificadores incorretos)", document_type=kind)
    return ValidationResult.ok(
        format_cnpj(n), normalized=n, scheme=CNPJScheme.LEGACY, document_type=kind,
    )

def _validate_alphanumeric_cnpj(cnpj: str) -> ValidationResult:
    """
    CNPJ alfanumérico (IN RFB nº 2.229/2024): 8 caracteres de raiz + 4 de ordem,
    ambos A-Z/0-9, seguidos de 2 DVs sempre numéricos.
    """
    clean = clean_document(cnpj)
    kind = DocumentType.CNPJ
    if len(clean) != CNPJ_LENGTH:
        return ValidationResult.fail("CNPJ deve ter 14 caracteres", document_type=kind)

    base, dv = clean[:12], clean[12:]
    if not is_alphanumeric(base):
        return ValidationResult.fail("CNPJ alfanumérico inválido (formato incorreto)", document_type=kind)
    if not _CNPJ_DV_RE.match(dv):
        return ValidationResult.fail("CNPJ inválido (dígitos verificadores devem ser numéricos)", document_type=kind)

    d1, d2 = cnpj_check_digits(base)
    if d1 != int(dv[0]):
        return ValidationResult.fail("CNPJ inválido (primeiro dígito verificador incorreto)", document_type=kind)
    if d2 != int(dv[1]):
        return ValidationResult.fail("CNPJ inválido (segundo dígito verificador incorreto)", document_type=kind)

    return ValidationResult.ok(
        format_alphanumeric_cnpj(clean), normalized=clean, scheme=CNPJScheme.V2026, document_type=kind,
    )

def validate_cnpj(cnpj: Optional[str]) -> ValidationResult:
    """
    Valida CNPJ nos dois esquemas. 14 dígitos -> tradicional;
    qualquer letra (ou outro caractere) -> alfanumérico 2026.
    """
    scheme = detect_cnpj_scheme(cnpj)
    if scheme is None:
        return ValidationResult.fail("CNPJ deve ter 14 caracteres", document_type=DocumentType.CNPJ)
    if scheme is CNPJScheme.LEGACY:
        return _validate_legacy_cnpj(cnpj or "")
    return _validate_alphanumeric_cnpj(cnpj or "")

# ---------------- Documento (CPF ou CNPJ) ----------------

def validate_document(document: Optional[str]) -> ValidationResult:
    """
    Valida CPF (11 dígitos) ou CNPJ (14 caracteres, tradicional ou alfanumérico),
    escolhendo o validador pelo tamanho/alfabeto da entrada.
    """
    clean = clean_document(document)

    if has_letter(clean):
        if len(clean) == CNPJ_LENGTH:
            log.debug("documento com letras -> CNPJ alfanumérico")
            return validate_cnpj(document)
        return ValidationResult.fail("CNPJ alfanumérico deve ter 14 caracteres", document_type=DocumentType.CNPJ)

    n = only_digits(clean)
    if len(n) == CPF_LENGTH:
        log.debug("documento com 11 dígitos -> CPF")
        return validate_cpf(document)
    if len(n) == CNPJ_LENGTH:
        log.debug("documento com 14 dígitos -> CNPJ")
        return validate_cnpj(document)
    return ValidationResult.fail("Documento deve ter 11 dígitos (CPF) ou 14 caracteres (CNPJ)")

def is_valid_cpf(cpf: Optional[str]) -> bool:
    return validate_cpf(cpf).is_valid

def is_valid_cnpj(cnpj: Optional[str]) -> bool:
    return validate_cnpj(cnpj).is_valid
