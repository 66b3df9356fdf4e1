import streamlit as st

_GLOBAL_CSS = """
<style>
.block-container { max-width: 960px; }
button[kind="primary"] { padding: 0.6rem 1rem; }
.stMetric { text-align: center; }
</style>
"""

def apply_global_style():
    st.markdown(_GLOBAL_CSS, unsafe_allow_html=True)

def header_nav(title: str, subtitle: str = ""):
    """Título padrão de páginas."""
    apply_global_style()
    st.title(title)
    if subtitle:
        st.caption(subtitle)
    st.divider()

def section(title: str, subtitle: str | None = None):
    st.subheader(title)
    if subtitle:
        st.caption(subtitle)

def footer():
    st.markdown("---")
    st.caption("CPF/CNPJ validados localmente. CNPJ alfanumérico conforme IN RFB nº 2.229/2024.")

def toolbar(*buttons: tuple[str, str]):
    """
    Renderiza um conjunto de botões de navegação.
    Ex.: toolbar(("🪪 Documentos","pages/1_Documentos.py"), ("📦 Lote","pages/3_Validacao_em_Lote.py"))
    """
    cols = st.columns(len(buttons))
    for col, (label, target) in zip(cols, buttons):
        with col:
            st.page_link(target, label=label, use_container_width=True)
