# docbr/main.py (streamlit run docbr/main.py)
from __future__ import annotations
import sys
from pathlib import Path

import streamlit as st

# --- bootstrap de caminho para permitir 'from docbr. ...' ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------

from docbr.components.layout import header_nav, footer, toolbar

st.set_page_config(page_title="docbr", layout="centered")

PAGE_MAP = {
    "documentos": "pages/1_Documentos.py",
    "pix": "pages/2_Chave_PIX.py",
    "lote": "pages/3_Validacao_em_Lote.py",
}

def _qs_params():
    try:
        return dict(st.query_params)
    except Exception:
        return st.experimental_get_query_params()  # type: ignore[attr-defined]

params = _qs_params()
requested = None
for k in ("page", "p", "goto"):
    if k in params:
        v = params[k]
        requested = (v[0] if isinstance(v, list) else v).lower()
        break

# ---------------- Deep-link por querystring ----------------
if requested in PAGE_MAP and "routed_once" not in st.session_state:
    st.session_state.routed_once = True
    st.switch_page(PAGE_MAP[requested])

header_nav("🪪 docbr", "Validação e formatação de CPF, CNPJ (inclusive alfanumérico), CEP, telefone e CRECI")
st.markdown(
    """
- **Documentos**: um só campo para CPF ou CNPJ, com máscara automática e validação dos dígitos verificadores.
- **Chave PIX**: checagem da chave conforme o tipo (CPF, CNPJ, e-mail, telefone ou aleatória).
- **Lote**: envie um CSV/XLSX e baixe a planilha com o resultado linha a linha.
    """
)
toolbar(
    ("🪪 Documentos", PAGE_MAP["documentos"]),
    ("💸 Chave PIX", PAGE_MAP["pix"]),
    ("📦 Lote", PAGE_MAP["lote"]),
)
footer()
