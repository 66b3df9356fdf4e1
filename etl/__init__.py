# etl/__init__.py
"""Jobs em lote do docbr.

Use como módulo:
    python -m etl.validate_documents --src clientes.csv --out clientes_validado.csv
    python -m etl.validate_documents --src base.xlsx --column cpf_cnpj --strict
"""
__all__ = []
