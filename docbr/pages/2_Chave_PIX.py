import streamlit as st

# --- bootstrap de caminho para permitir 'from docbr. ...' ---
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------

from docbr.components.layout import header_nav, footer
from docbr.components.forms import pix_key_fields
from docbr.services.formatters import format_brl
from docbr.services.pix import validate_pix_key

st.set_page_config(page_title="docbr • Chave PIX", layout="centered")
header_nav("💸 Chave PIX", "Validação da chave antes de solicitar o saque")

with st.container(border=True):
    kt, key = pix_key_fields("saque")
    value = st.number_input("Valor do saque", min_value=0.0, step=10.0, value=0.0)
    st.caption(f"Valor: {format_brl(value)}")

    if st.button("Validar chave", type="primary"):
        res = validate_pix_key(key, kt)
        if res.is_valid:
            st.success(f"Chave PIX válida: {res.formatted}")
        else:
            st.error(res.error)

footer()
