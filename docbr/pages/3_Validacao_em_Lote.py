from __future__ import annotations
import io
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# --- bootstrap raiz ---
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docbr.components.layout import header_nav, footer
from docbr.components.cards import metric_card
from docbr.services.batch import validate_documents, summarize_validation
from docbr.utils.config import setting

st.set_page_config(page_title="docbr • Lote", layout="wide")
header_nav("📦 Validação em lote", "CSV ou XLSX com uma coluna de CPF/CNPJ")

@st.cache_data(show_spinner=False)
def _read_upload(name: str, data: bytes) -> pd.DataFrame:
    buf = io.BytesIO(data)
    if name.lower().endswith(".xlsx"):
        return pd.read_excel(buf, dtype=str, engine="openpyxl")
    return pd.read_csv(buf, dtype=str, sep=setting("DOCBR_CSV_SEP"))

up = st.file_uploader("Arquivo", type=["csv", "xlsx"])
if up is None:
    st.info("Envie um arquivo para começar.")
    footer()
    st.stop()

df = _read_upload(up.name, up.getvalue())
default_col = setting("DOCBR_DOCUMENT_COLUMN")
cols = list(df.columns)
column = st.selectbox("Coluna com o documento", options=cols,
                      index=cols.index(default_col) if default_col in cols else 0)

out = validate_documents(df, column)
summary = summarize_validation(out)

c1, c2, c3 = st.columns(3)
with c1: metric_card("Total", summary["total"])
with c2: metric_card("Válidos", summary["validos"])
with c3: metric_card("Inválidos", summary["invalidos"])

only_invalid = st.checkbox("Mostrar só inválidos", value=False)
view = out[~out["documento_valido"]] if only_invalid else out
st.dataframe(view, use_container_width=True, hide_index=True)

st.download_button(
    "Baixar resultado (CSV)",
    data=out.to_csv(index=False).encode("utf-8"),
    file_name=f"{Path(up.name).stem}_validado.csv",
    mime="text/csv",
)
footer()
