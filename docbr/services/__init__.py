from .checksum import char_value, mod11_digit, cpf_check_digits, cnpj_check_digits
from .detector import detect_cnpj_scheme, detect_document_type
from .formatters import (
    format_cpf,
    format_cnpj,
    format_alphanumeric_cnpj,
    format_cep,
    format_cpf_input,
    format_cnpj_input,
    format_document_input,
    format_cep_input,
    is_valid_cep_format,
    format_creci_input,
    format_phone_input,
    format_brl,
)
from .documents import validate_cpf, validate_cnpj, validate_document, is_valid_cpf, is_valid_cnpj
from .contact import is_valid_email, is_valid_phone, validate_phone
from .pix import format_pix_key_input, check_pix_key_input, validate_pix_key
from .batch import validate_documents, summarize_validation

__all__ = [
    "char_value",
    "mod11_digit",
    "cpf_check_digits",
    "cnpj_check_digits",
    "detect_cnpj_scheme",
    "detect_document_type",
    "format_cpf",
    "format_cnpj",
    "format_alphanumeric_cnpj",
    "format_cep",
    "format_cpf_input",
    "format_cnpj_input",
    "format_document_input",
    "format_cep_input",
    "is_valid_cep_format",
    "format_creci_input",
    "format_phone_input",
    "format_brl",
    "validate_cpf",
    "validate_cnpj",
    "validate_document",
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_email",
    "is_valid_phone",
    "validate_phone",
    "format_pix_key_input",
    "check_pix_key_input",
    "validate_pix_key",
    "validate_documents",
    "summarize_validation",
]
