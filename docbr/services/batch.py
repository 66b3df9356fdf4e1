from __future__ import annotations
from typing import Any, Dict

import pandas as pd

from docbr.utils.logs import get_logger
from .documents import validate_document

RESULT_COLUMNS = [
    "documento_valido",
    "documento_formatado",
    "documento_normalizado",
    "tipo_documento",
    "esquema_cnpj",
    "documento_erro",
]

log = get_logger(__name__)

def _row_result(value: Any) -> pd.Series:
    raw = "" if value is None or (not isinstance(value, str) and pd.isna(value)) else str(value)
    res = validate_document(raw)
    return pd.Series([
        res.is_valid,
        res.formatted,
        res.normalized,
        res.document_type.value if res.document_type else None,
        res.scheme.value if res.scheme else None,
        res.error,
    ], index=RESULT_COLUMNS)

def validate_documents(df: pd.DataFrame, column: str = "documento") -> pd.DataFrame:
    """
    Valida uma coluna de CPF/CNPJ de um DataFrame.
    Retorna uma cópia com as colunas de RESULT_COLUMNS, sem alterar o original.
    """
    if df is None or df.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas disponíveis: {', '.join(map(str, df.columns))}")

    view = df.copy()
    results = view[column].apply(_row_result)
    for c in RESULT_COLUMNS:
        view[c] = results[c]
    view["documento_valido"] = view["documento_valido"].astype(bool)

    log.info(f"{len(view)} documentos validados ({int(view['documento_valido'].sum())} válidos)")
    return view

def summarize_validation(df: pd.DataFrame) -> Dict[str, Any]:
    """Totais por validade, tipo de documento e esquema de CNPJ."""
    if df is None or df.empty or "documento_valido" not in df.columns:
        return {"total": 0, "validos": 0, "invalidos": 0, "por_tipo": {}, "por_esquema": {}}
    valid = int(df["documento_valido"].sum())
    return {
        "total": int(len(df)),
        "validos": valid,
        "invalidos": int(len(df)) - valid,
        "por_tipo": {str(k): int(v) for k, v in df["tipo_documento"].dropna().value_counts().items()},
        "por_esquema": {str(k): int(v) for k, v in df["esquema_cnpj"].dropna().value_counts().items()},
    }
