from __future__ import annotations
from typing import Optional

from docbr.models import CNPJScheme, DocumentType
from docbr.utils.text import clean_document, has_letter, is_digits, only_digits

CPF_LENGTH = 11
CNPJ_LENGTH = 14


def detect_cnpj_scheme(raw: Optional[str]) -> Optional[CNPJScheme]:
    """
    Esquema de um CNPJ de 14 caracteres (após limpar pontuação):
    só dígitos -> LEGACY; qualquer outro conteúdo -> V2026.
    Retorna None se o tamanho não for 14.
    """
    clean = clean_document(raw)
    if len(clean) != CNPJ_LENGTH:
        return None
    return CNPJScheme.LEGACY if is_digits(clean) else CNPJScheme.V2026


def detect_document_type(raw: Optional[str]) -> Optional[DocumentType]:
    """
    CPF ou CNPJ pelo tamanho/alfabeto:
    - com letra A-Z: CNPJ se tiver 14 caracteres
    - só números: 11 dígitos -> CPF, 14 -> CNPJ
    """
    clean = clean_document(raw)
    if has_letter(clean):
        return DocumentType.CNPJ if len(clean) == CNPJ_LENGTH else None
    n = len(only_digits(clean))
    if n == CPF_LENGTH:
        return DocumentType.CPF
    if n == CNPJ_LENGTH:
        return DocumentType.CNPJ
    return None
