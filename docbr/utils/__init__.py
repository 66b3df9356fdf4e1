from .config import settings, set_settings, reset_settings, setting
from .logs import get_logger
from .text import only_digits, clean_document, has_letter, is_digits, is_alphanumeric, keep

__all__ = [
    "settings", "set_settings", "reset_settings", "setting",
    "get_logger",
    "only_digits", "clean_document", "has_letter", "is_digits", "is_alphanumeric", "keep",
]
