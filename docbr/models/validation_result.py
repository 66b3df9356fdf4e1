from __future__ import annotations
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, model_validator

from .document import CNPJScheme, DocumentType


class ValidationResult(BaseModel):
    """
    Resultado imutável de uma validação de documento.
    - válido: `formatted` presente, `error` ausente
    - inválido: `error` presente, `formatted` ausente
    `normalized`/`scheme` só aparecem nos caminhos de CNPJ.
    Os aliases camelCase reproduzem o formato consumido pelos formulários.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    formatted: str | None = Field(default=None)
    error: str | None = Field(default=None)
    normalized: str | None = Field(default=None, description="Forma canônica sem pontuação, maiúscula")
    scheme: CNPJScheme | None = Field(default=None, description="Algoritmo de CNPJ que validou")
    document_type: DocumentType | None = Field(default=None, alias="documentType")

    @model_validator(mode="after")
    def _exactly_one_of_formatted_or_error(self) -> "ValidationResult":
        if self.is_valid and (self.formatted is None or self.error is not None):
            raise ValueError("resultado válido exige 'formatted' e não admite 'error'")
        if not self.is_valid and (self.error is None or self.formatted is not None):
            raise ValueError("resultado inválido exige 'error' e não admite 'formatted'")
        return self

    # ---------------- Construtores ----------------

    @classmethod
    def ok(cls, formatted: str, **extra: Any) -> "ValidationResult":
        return cls(is_valid=True, formatted=formatted, **extra)

    @classmethod
    def fail(cls, error: str, **extra: Any) -> "ValidationResult":
        return cls(is_valid=False, error=error, **extra)

    # ---------------- Conveniências ----------------

    def to_display_dict(self) -> dict[str, Any]:
        """Dicionário pronto para UI (tabelas, exportações)."""
        return {
            "Válido": "Sim" if self.is_valid else "Não",
            "Tipo": self.document_type.value if self.document_type else None,
            "Formatado": self.formatted,
            "Normalizado": self.normalized,
            "Esquema CNPJ": self.scheme.value if self.scheme else None,
            "Erro": self.error,
        }
