from __future__ import annotations
from typing import Callable, Optional

import streamlit as st

from docbr.models import PixKeyType, ValidationResult
from docbr.services.formatters import (
    format_cep_input, format_creci_input, format_phone_input, is_valid_cep_format,
)
from docbr.services.contact import validate_phone
from docbr.services.pix import check_pix_key_input, format_pix_key_input

PIX_KEY_LABELS = {
    PixKeyType.CPF: "CPF",
    PixKeyType.CNPJ: "CNPJ",
    PixKeyType.EMAIL: "E-mail",
    PixKeyType.PHONE: "Telefone",
    PixKeyType.RANDOM: "Chave aleatória",
}

def _reformat(key: str, formatter: Callable[[str], str]) -> None:
    st.session_state[key] = formatter(st.session_state.get(key, ""))

def masked_input(label: str, key: str, formatter: Callable[[str], str], placeholder: str = "") -> str:
    """text_input que reaplica a máscara a cada alteração."""
    st.session_state.setdefault(key, "")
    return st.text_input(label, key=key, placeholder=placeholder, on_change=_reformat, args=(key, formatter))

def show_result(res: Optional[ValidationResult], ok_text: str = "OK") -> None:
    if res is None:
        return
    if res.is_valid:
        st.caption(f"✅ {ok_text}")
    else:
        st.caption(f"❌ {res.error}")

def address_fields(prefix: str = "addr"):
    """CEP + telefone + CRECI. Retorna (cep, phone, creci)."""
    c1, c2, c3 = st.columns(3)
    with c1:
        cep = masked_input("CEP", f"{prefix}_cep", format_cep_input, "00000-000")
        if cep and not is_valid_cep_format(cep):
            st.caption("❌ CEP deve ter 8 dígitos")
    with c2:
        phone = masked_input("Telefone", f"{prefix}_phone", format_phone_input, "(00) 00000-0000")
        if phone:
            show_result(validate_phone(phone), "Telefone válido")
    with c3:
        creci = masked_input("CRECI", f"{prefix}_creci", format_creci_input, "12345/SP")
    return cep, phone, creci

def pix_key_fields(prefix: str = "pix"):
    """Tipo + chave PIX com máscara e checagem em tempo real. Retorna (tipo, chave)."""
    options = list(PIX_KEY_LABELS)
    kt = st.selectbox("Tipo de chave", options=options, format_func=lambda k: PIX_KEY_LABELS[k],
                      index=options.index(PixKeyType.RANDOM), key=f"{prefix}_type")
    key = masked_input("Chave PIX *", f"{prefix}_key", lambda v: format_pix_key_input(v, kt))
    show_result(check_pix_key_input(key, kt), f"{PIX_KEY_LABELS[kt]} válido")
    return kt, key
