from __future__ import annotations
import re
from pathlib import Path
from typing import Dict, Iterable, Optional

import pandas as pd

from docbr.utils.config import setting
from docbr.utils.logs import get_logger  # noqa: F401  (reexportado para os jobs)

# ----------------- paths -----------------
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]

def output_dir() -> Path:
    p = Path(setting("DOCBR_OUTPUT_DIR"))
    return p if p.is_absolute() else project_root() / p

def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

# ----------------- io helpers -----------------
def _is_excel(path: Path) -> bool:
    return path.suffix.lower() == ".xlsx"

def read_table(path: Path, sheet: int | str = 0) -> pd.DataFrame:
    """CSV ou XLSX, tudo como texto (preserva zeros à esquerda de CPF/CNPJ)."""
    if _is_excel(path):
        df = pd.read_excel(path, sheet_name=sheet, dtype=str, engine="openpyxl")
    else:
        df = pd.read_csv(path, dtype=str, sep=setting("DOCBR_CSV_SEP"))
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_csv(df: pd.DataFrame, path: Path) -> None:
    ensure_parent(path)
    df.to_csv(path, index=False, sep=setting("DOCBR_CSV_SEP"))

def write_excel(df: pd.DataFrame, path: Path, sheet: str = "Sheet1") -> None:
    ensure_parent(path)
    with pd.ExcelWriter(path, engine="openpyxl") as xw:
        df.to_excel(xw, index=False, sheet_name=sheet)

def write_table(df: pd.DataFrame, path: Path) -> None:
    if _is_excel(path):
        write_excel(df, path, sheet="validacao")
    else:
        write_csv(df, path)

# ----------------- text/columns -----------------
def norm_token(s: str) -> str:
    return re.sub(r"\s+"," ", re.sub(r"[^a-z0-9_ ]","", (s or "").lower())).strip()

def find_column(df: pd.DataFrame, canon: str, aliases: Iterable[str]) -> Optional[str]:
    """Nome real da coluna que casa com `canon` ou algum alias (ignorando caixa/pontuação)."""
    wanted = {norm_token(canon), *[norm_token(a) for a in aliases]}
    current: Dict[str, str] = {norm_token(str(c)): c for c in df.columns}
    for k, orig in current.items():
        if k in wanted:
            return orig
    return None
