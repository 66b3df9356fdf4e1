from __future__ import annotations
import sys
import types
from pathlib import Path

import pytest
import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docbr.utils import config

# ---------- DOCUMENTOS DE TESTE ----------
# CPF 111.444.777-35 e CNPJ 11.222.333/0001-81 são exemplos clássicos de teste;
# 12.ABC.345/01DE-35 é o exemplo oficial de CNPJ alfanumérico da Receita.

@pytest.fixture
def valid_cpf() -> str:
    return "11144477735"

@pytest.fixture
def valid_cnpj() -> str:
    return "11222333000181"

@pytest.fixture
def valid_alnum_cnpj() -> str:
    return "12ABC34501DE35"

@pytest.fixture
def documents_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Ana", "documento": "111.444.777-35"},
        {"nome": "Imobiliária X", "documento": "11222333000181"},
        {"nome": "Imobiliária Y", "documento": "12.ABC.345/01DE-35"},
        {"nome": "Bruno", "documento": "12345678900"},
        {"nome": "Sem doc", "documento": None},
        {"nome": "Vazio", "documento": ""},
    ])

# ---------- CONFIG ISOLADA ----------
@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for k in config._DEFAULTS:
        monkeypatch.delenv(k, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()

# ---------- UTIL: STREAMLIT FALSO PARA TESTES DE COMPONENTES ----------
class _Ctx:
    def __enter__(self): return self
    def __exit__(self, *exc): return False

@pytest.fixture
def fake_st():
    """
    Módulo 'streamlit' mínimo: guarda o session_state e registra as mensagens exibidas.
    Use com monkeypatch.setattr(modulo, "st", fake_st).
    """
    st = types.SimpleNamespace()
    st.session_state = {}
    st.calls = []
    def _record(kind):
        return lambda *a, **k: st.calls.append((kind, a[0] if a else None))
    st.success = _record("success")
    st.error = _record("error")
    st.caption = _record("caption")
    st.markdown = _record("markdown")
    st.write = _record("write")
    st.columns = lambda spec: [_Ctx() for _ in range(spec if isinstance(spec, int) else len(spec))]
    st.container = lambda **k: _Ctx()
    st.button = lambda *a, **k: False
    st.text_input = lambda label, key=None, **k: st.session_state.get(key, "")
    st.selectbox = lambda label, options=(), index=0, **k: list(options)[index]
    return st
