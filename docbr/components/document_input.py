from __future__ import annotations
from typing import Optional

import streamlit as st

from docbr.models import DocumentType, ValidationResult
from docbr.services.documents import validate_document
from docbr.services.formatters import format_document_input
from docbr.utils.text import only_digits


def document_feedback(value: Optional[str]) -> Optional[ValidationResult]:
    """Nada a mostrar enquanto não houver dígito; senão, o resultado da validação."""
    if not only_digits(value):
        return None
    return validate_document(value)


def success_label(result: ValidationResult) -> str:
    return "CNPJ válido" if result.document_type is DocumentType.CNPJ else "CPF válido"


def _on_change(key: str) -> None:
    raw = st.session_state.get(key, "")
    formatted = format_document_input(raw)
    res = document_feedback(formatted)
    # válido: troca pela forma canônica
    st.session_state[key] = res.formatted if res is not None and res.is_valid else formatted


def _clear(key: str) -> None:
    st.session_state[key] = ""


def document_input(
    label: str = "Documento (CPF/CNPJ)",
    key: str = "document",
    placeholder: str = "CPF ou CNPJ",
    disabled: bool = False,
    show_validation: bool = True,
) -> str:
    """
    Campo único de CPF/CNPJ: a máscara muda sozinha ao passar de 11 dígitos
    ou ao digitar uma letra (CNPJ alfanumérico). Retorna o valor formatado.
    """
    st.session_state.setdefault(key, "")
    value = st.text_input(
        label, key=key, placeholder=placeholder, disabled=disabled,
        on_change=_on_change, args=(key,),
    )
    res = document_feedback(value)
    if res is None or not show_validation:
        return value

    if res.is_valid:
        st.success(f"✅ {success_label(res)}")
    else:
        c1, c2 = st.columns([4, 1])
        with c1:
            st.error(f"❌ {res.error}")
        with c2:
            st.button("Limpar", key=f"{key}__clear", on_click=_clear, args=(key,))
    return value
