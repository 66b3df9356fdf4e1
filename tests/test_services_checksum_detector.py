from __future__ import annotations
import pytest

from docbr.models import CNPJScheme, DocumentType
from docbr.services.checksum import char_value, mod11_digit, cpf_check_digits, cnpj_check_digits, CNPJ_WEIGHTS_1
from docbr.services.detector import detect_cnpj_scheme, detect_document_type

def test_char_value_uses_ascii_minus_48():
    assert char_value("0") == 0 and char_value("9") == 9
    assert char_value("A") == 17 and char_value("Z") == 42
    assert char_value("#") == 0

def test_mod11_remainder_rule():
    # soma 11 -> resto 0 -> DV 0; soma 12 -> resto 1 -> DV 0; soma 13 -> resto 2 -> DV 9
    assert mod11_digit([11], [1]) == 0
    assert mod11_digit([12], [1]) == 0
    assert mod11_digit([13], [1]) == 9

def test_check_digits_known_values():
    assert cpf_check_digits("111444777") == (3, 5)
    assert cpf_check_digits("123456789") == (0, 9)
    assert cnpj_check_digits("112223330001") == (8, 1)
    assert cnpj_check_digits("12ABC34501DE") == (3, 5)

def test_cnpj_weight_tables_are_immutable():
    assert isinstance(CNPJ_WEIGHTS_1, tuple) and len(CNPJ_WEIGHTS_1) == 12

@pytest.mark.parametrize("raw,expected", [
    ("11.222.333/0001-81", CNPJScheme.LEGACY),
    ("00000000000000", CNPJScheme.LEGACY),
    ("12.ABC.345/01DE-35", CNPJScheme.V2026),
    ("ABCDEFGHIJKLMN", CNPJScheme.V2026),
    ("123", None),
    ("", None),
])
def test_detect_cnpj_scheme(raw, expected):
    assert detect_cnpj_scheme(raw) == expected

@pytest.mark.parametrize("raw,expected", [
    ("111.444.777-35", DocumentType.CPF),
    ("11222333000181", DocumentType.CNPJ),
    ("12abc34501de35", DocumentType.CNPJ),
    ("12ABC", None),
    ("123456789012", None),
    (None, None),
])
def test_detect_document_type(raw, expected):
    assert detect_document_type(raw) == expected
