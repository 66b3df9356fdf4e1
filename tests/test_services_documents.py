from __future__ import annotations
import pytest

from docbr.models import CNPJScheme, DocumentType
from docbr.services.checksum import cnpj_check_digits, cpf_check_digits
from docbr.services.documents import validate_cpf, validate_cnpj, validate_document, is_valid_cpf, is_valid_cnpj
from docbr.utils.text import only_digits

# ---------------- CPF ----------------

def test_cpf_known_values(valid_cpf):
    r = validate_cpf(valid_cpf)
    assert r.is_valid is True and r.formatted == "111.444.777-35" and r.error is None
    assert r.document_type == DocumentType.CPF
    assert r.normalized is None and r.scheme is None
    assert is_valid_cpf("529.982.247-25") is True

def test_cpf_repeated_sequence():
    r = validate_cpf("11111111111")
    assert r.is_valid is False and "sequência" in r.error
    assert validate_cpf("000.000.000-00").error == "CPF inválido (sequência inválida)"

def test_cpf_wrong_check_digits():
    r = validate_cpf("12345678900")
    assert r.is_valid is False and r.formatted is None
    assert r.error == "CPF inválido (dígitos verificadores incorretos)"
    assert validate_cpf("12345678909").is_valid is True

@pytest.mark.parametrize("raw", ["", None, "123", "1114447773", "111444777350", "abc"])
def test_cpf_wrong_length(raw):
    assert validate_cpf(raw).error == "CPF deve ter 11 dígitos"

@pytest.mark.parametrize("pos", [9, 10])
def test_cpf_any_check_digit_flip_is_rejected(valid_cpf, pos):
    for d in "0123456789":
        if d == valid_cpf[pos]:
            continue
        flipped = valid_cpf[:pos] + d + valid_cpf[pos + 1:]
        assert validate_cpf(flipped).error == "CPF inválido (dígitos verificadores incorretos)"

@pytest.mark.parametrize("base", ["111444777", "529982247", "123456789", "000000001", "987654321"])
def test_cpf_round_trip(base):
    d1, d2 = cpf_check_digits(base)
    n = f"{base}{d1}{d2}"
    r = validate_cpf(n)
    assert r.is_valid and only_digits(r.formatted) == n

# ---------------- CNPJ tradicional ----------------

def test_cnpj_legacy_known_value(valid_cnpj):
    r = validate_cnpj(valid_cnpj)
    assert r.is_valid is True
    assert r.scheme == CNPJScheme.LEGACY
    assert r.formatted == "11.222.333/0001-81"
    assert r.normalized == "11222333000181"
    assert r.document_type == DocumentType.CNPJ

def test_cnpj_legacy_accepts_mask():
    assert is_valid_cnpj("04.252.011/0001-10") is True
    assert validate_cnpj(" 11.222.333/0001-81 ").is_valid is True

def test_cnpj_legacy_failures():
    assert validate_cnpj("11.111.111/1111-11").error == "CNPJ inválido (sequência inválida)"
    assert validate_cnpj("11222333000182").error == "CNPJ inválido (dígitos verificadores incorretos)"
    assert validate_cnpj("11222333000191").error == "CNPJ inválido (dígitos verificadores incorretos)"

@pytest.mark.parametrize("raw", ["", None, "1122233300018", "112223330001811"])
def test_cnpj_wrong_length(raw):
    r = validate_cnpj(raw)
    assert r.is_valid is False and r.error == "CNPJ deve ter 14 caracteres"

# ---------------- CNPJ alfanumérico (2026) ----------------

def test_cnpj_alphanumeric_official_example(valid_alnum_cnpj):
    r = validate_cnpj(valid_alnum_cnpj)
    assert r.is_valid is True
    assert r.scheme == CNPJScheme.V2026
    assert r.formatted == "12.ABC.345/01DE-35"
    assert r.normalized == "12ABC34501DE35"

def test_cnpj_alphanumeric_is_case_insensitive():
    r = validate_cnpj("12.abc.345/01de-35")
    assert r.is_valid and r.normalized == "12ABC34501DE35"

def test_cnpj_alphanumeric_failures():
    assert validate_cnpj("12ABC34501DE45").error == "CNPJ inválido (primeiro dígito verificador incorreto)"
    assert validate_cnpj("12ABC34501DE36").error == "CNPJ inválido (segundo dígito verificador incorreto)"
    assert validate_cnpj("12ABC34501DE3X").error == "CNPJ inválido (dígitos verificadores devem ser numéricos)"
    assert validate_cnpj("12ABC34501D#35").error == "CNPJ alfanumérico inválido (formato incorreto)"

def test_cnpj_with_letters_never_falls_back_to_digit_path():
    # só dígitos restariam 12 -> se caísse no caminho numérico o erro seria de tamanho
    r = validate_cnpj("AB222333000181")
    assert r.is_valid is False
    assert "14" not in r.error

def test_cnpj_alphanumeric_rejects_non_ascii_base():
    assert validate_cnpj("12ÁBC34501DE35").error == "CNPJ alfanumérico inválido (formato incorreto)"

# ---------------- sensibilidade dos DVs ----------------

def _flips(cnpj: str, pos: int):
    for d in "0123456789":
        if d != cnpj[pos]:
            yield cnpj[:pos] + d + cnpj[pos + 1:]

def _with_dv(base: str) -> str:
    d1, d2 = cnpj_check_digits(base)
    return f"{base}{d1}{d2}"

@pytest.mark.parametrize("base", ["112223330001", "042520110001", "987654320001", "000000010001"])
@pytest.mark.parametrize("pos", [12, 13])
def test_cnpj_legacy_any_check_digit_flip_is_rejected(base, pos):
    cnpj = _with_dv(base)
    assert validate_cnpj(cnpj).is_valid
    for flipped in _flips(cnpj, pos):
        assert validate_cnpj(flipped).error == "CNPJ inválido (dígitos verificadores incorretos)"

@pytest.mark.parametrize("base", ["12ABC34501DE", "ZZZZZZZZ0001", "A1B2C3D4E5F6", "00000000000A"])
@pytest.mark.parametrize("pos,error", [
    (12, "CNPJ inválido (primeiro dígito verificador incorreto)"),
    (13, "CNPJ inválido (segundo dígito verificador incorreto)"),
])
def test_cnpj_alphanumeric_any_check_digit_flip_is_rejected(base, pos, error):
    cnpj = _with_dv(base)
    assert validate_cnpj(cnpj).scheme == CNPJScheme.V2026
    for flipped in _flips(cnpj, pos):
        assert validate_cnpj(flipped).error == error

# ---------------- Documento ----------------

def test_validate_document_dispatch(valid_cpf, valid_cnpj, valid_alnum_cnpj):
    assert validate_document(valid_cpf).document_type == DocumentType.CPF
    assert validate_document("111.444.777-35").formatted == "111.444.777-35"
    assert validate_document(valid_cnpj).scheme == CNPJScheme.LEGACY
    assert validate_document(valid_alnum_cnpj).scheme == CNPJScheme.V2026

def test_validate_document_length_errors():
    assert validate_document("12ABC").error == "CNPJ alfanumérico deve ter 14 caracteres"
    r = validate_document("123")
    assert r.error == "Documento deve ter 11 dígitos (CPF) ou 14 caracteres (CNPJ)"
    assert r.document_type is None
    assert validate_document("").is_valid is False
    assert validate_document(None).is_valid is False

def test_validate_document_propagates_specific_errors():
    assert validate_document("11111111111").error == "CPF inválido (sequência inválida)"
    assert validate_document("12ABC34501DE36").error == "CNPJ inválido (segundo dígito verificador incorreto)"
