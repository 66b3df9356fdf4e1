from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Logging
    "DOCBR_LOG_LEVEL": "INFO",
    "DOCBR_LOG_FORMAT": "[%(levelname)s] %(message)s",
    # Lote (CSV/XLSX)
    "DOCBR_DOCUMENT_COLUMN": "documento",
    "DOCBR_CSV_SEP": ",",
    "DOCBR_OUTPUT_DIR": "data/processed",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

def _coerce(key: str, value: str) -> str:
    # só chaves de diretório viram path (expande ~ e vars)
    if key.endswith("_DIR"):
        return str(Path(os.path.expandvars(os.path.expanduser(value))))
    return value

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna o dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. DOCBR_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(k, env_val)
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = _coerce(k, default)
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    _runtime_overrides.update({k: _coerce(k, str(v)) for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_settings() -> None:
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' inexistente. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]
