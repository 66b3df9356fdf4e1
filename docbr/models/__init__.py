from .document import CNPJScheme, DocumentType, PixKeyType
from .validation_result import ValidationResult

__all__ = [
    "CNPJScheme",
    "DocumentType",
    "PixKeyType",
    "ValidationResult",
]
