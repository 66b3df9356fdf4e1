from __future__ import annotations
from enum import Enum


class DocumentType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


class CNPJScheme(str, Enum):
    """Algoritmos de dígito verificador de CNPJ."""
    LEGACY = "legacy"      # 14 dígitos numéricos (até jul/2026)
    V2026 = "2026"         # 12 caracteres A-Z/0-9 + 2 DVs numéricos (IN RFB 2.229/2024)


class PixKeyType(str, Enum):
    """Tipos de chave PIX aceitos no formulário de saque."""
    CPF = "CPF"
    CNPJ = "CNPJ"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    RANDOM = "RANDOM"      # chave aleatória (UUID)
