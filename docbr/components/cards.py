import streamlit as st

from docbr.models import ValidationResult

def validation_badge(res: ValidationResult) -> str:
    """Texto curto para tabelas/listas."""
    if res.is_valid:
        scheme = f" · {res.scheme.value}" if res.scheme else ""
        return f"✅ {res.formatted}{scheme}"
    return f"❌ {res.error}"

def result_card(res: ValidationResult, title: str = "Resultado"):
    """Cartão com os campos do resultado da validação."""
    with st.container(border=True):
        st.markdown(f"**{title}**")
        st.write(validation_badge(res))
        for label, value in res.to_display_dict().items():
            if value:
                st.write(f"- **{label}**: {value}")

def metric_card(label: str, value, help_text: str | None = None):
    col = st.container(border=True)
    with col:
        st.metric(label, value)
        if help_text:
            st.caption(help_text)
