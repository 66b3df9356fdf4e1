"""Validação e formatação de documentos brasileiros (CPF, CNPJ, CEP, CRECI, telefone)."""
from .models import CNPJScheme, DocumentType, PixKeyType, ValidationResult
from .services import *  # noqa: F401,F403
from .services import __all__ as _services_all

__version__ = "0.1.0"

__all__ = ["CNPJScheme", "DocumentType", "PixKeyType", "ValidationResult", *_services_all]
