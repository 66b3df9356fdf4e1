import streamlit as st

# --- bootstrap de caminho para permitir 'from docbr. ...' ---
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------

from docbr.components.layout import header_nav, footer, section
from docbr.components.document_input import document_input, document_feedback
from docbr.components.forms import address_fields
from docbr.components.cards import result_card

st.set_page_config(page_title="docbr • Documentos", layout="centered")
header_nav("🪪 Documentos", "Digite um CPF ou CNPJ; a máscara acompanha o que você digita")

doc = document_input(key="doc_main")
res = document_feedback(doc)
if res is not None:
    result_card(res, "Detalhes da validação")

st.divider()
section("Endereço e contato", "CEP, telefone (com DDD) e CRECI do corretor")
address_fields("doc")

footer()
