from __future__ import annotations
from typing import Iterable, Sequence, Tuple

# ---------------- Pesos ----------------

CPF_WEIGHTS_1: Tuple[int, ...] = tuple(range(10, 1, -1))   # 10..2 sobre 9 dígitos
CPF_WEIGHTS_2: Tuple[int, ...] = tuple(range(11, 1, -1))   # 11..2 sobre 10 dígitos

CNPJ_WEIGHTS_1: Tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2: Tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

_ZERO = ord("0")


def char_value(ch: str) -> int:
    """
    Valor de um caractere no cálculo do DV (IN RFB 2.229/2024): código ASCII - 48.
    '0'..'9' -> 0..9 e 'A'..'Z' -> 17..42 (não reindexar para 0..25).
    """
    code = ord(ch)
    if 48 <= code <= 57 or 65 <= code <= 90:
        return code - _ZERO
    return 0


def mod11_digit(values: Iterable[int], weights: Sequence[int]) -> int:
    """Soma ponderada módulo 11; resto < 2 vira 0, senão 11 - resto."""
    r = sum(v * w for v, w in zip(values, weights)) % 11
    return 0 if r < 2 else 11 - r


# ---------------- CPF ----------------

def cpf_check_digits(base: str) -> Tuple[int, int]:
    """DVs de um CPF a partir dos 9 primeiros dígitos."""
    values = [int(c) for c in base[:9]]
    d1 = mod11_digit(values, CPF_WEIGHTS_1)
    d2 = mod11_digit(values + [d1], CPF_WEIGHTS_2)
    return d1, d2


def is_valid_cpf_checksum(n: str) -> bool:
    d1, d2 = cpf_check_digits(n)
    return n[9:11] == f"{d1}{d2}"


# ---------------- CNPJ ----------------

def cnpj_check_digits(base: str) -> Tuple[int, int]:
    """
    DVs de um CNPJ a partir da base de 12 caracteres.
    Vale para os dois esquemas: dígitos valem 0..9 em ambos.
    """
    values = [char_value(c) for c in base[:12]]
    d1 = mod11_digit(values, CNPJ_WEIGHTS_1)
    d2 = mod11_digit(values + [d1], CNPJ_WEIGHTS_2)
    return d1, d2
