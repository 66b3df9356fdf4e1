from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from docbr.services.batch import summarize_validation, validate_documents
from docbr.utils.config import setting
from etl.common import find_column, get_logger, output_dir, read_table, write_table

COLUMN_ALIASES = ["cpf_cnpj", "cpf/cnpj", "cpf", "cnpj", "doc", "documento"]

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Valida uma coluna de CPF/CNPJ de um CSV/XLSX.")
    ap.add_argument("--src", required=True, help="Arquivo de entrada (.csv ou .xlsx)")
    ap.add_argument("--out", default=None, help="Arquivo de saída (.csv ou .xlsx)")
    ap.add_argument("--column", default=None, help="Coluna com o documento (padrão: DOCBR_DOCUMENT_COLUMN ou alias)")
    ap.add_argument("--strict", action="store_true", help="Sai com código 1 se houver documento inválido")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log = get_logger("validate_documents")

    src = Path(args.src)
    if not src.exists():
        log.error(f"Faltando: {src}")
        sys.exit(1)

    df = read_table(src)
    column = args.column or find_column(df, setting("DOCBR_DOCUMENT_COLUMN"), COLUMN_ALIASES)
    if not column or column not in df.columns:
        log.error(f"Coluna de documento não encontrada em {src.name}. Colunas: {list(df.columns)}")
        sys.exit(1)

    out = validate_documents(df, column)
    dst = Path(args.out) if args.out else output_dir() / f"{src.stem}_validado.csv"
    write_table(out, dst)

    summary = summarize_validation(out)
    log.info(f"{summary['total']} linhas | {summary['validos']} válidas | {summary['invalidos']} inválidas")
    for tipo, n in summary["por_tipo"].items():
        log.info(f"  {tipo}: {n}")
    for esquema, n in summary["por_esquema"].items():
        log.info(f"  CNPJ {esquema}: {n}")
    log.info(f"→ {dst}")

    if args.strict and summary["invalidos"]:
        log.error(f"✖ {summary['invalidos']} documento(s) inválido(s)")
        sys.exit(1)
    return 0

if __name__ == "__main__":
    main()
