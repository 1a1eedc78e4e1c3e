"""Run SQL against the sample database and print the result as a table."""

from typing import List

import pandas as pd

from src.utils.database import get_session_conn
from src.utils.formatters import format_table


def run_query(sql: str, conn=None, show: bool = True) -> pd.DataFrame:
    """
    Executa a consulta, materializa todas as linhas e imprime a tabela.

    Erros do SQLite (sintaxe, tabela inexistente) sobem sem tradução.
    """
    if conn is None:
        conn = get_session_conn()
    cur = conn.execute(sql)
    try:
        rows = cur.fetchall()
        columns = [col[0] for col in cur.description] if cur.description else []
    finally:
        cur.close()
    df = pd.DataFrame(rows, columns=columns) if columns else pd.DataFrame()
    if show:
        print(format_table(df))
    return df


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def list_tables(conn=None) -> List[str]:
    """List user tables of the sample database, sorted by name."""
    df = run_query(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name",
        conn=conn,
        show=False,
    )
    return df["name"].tolist()


def describe_table(name: str, conn=None, show: bool = True) -> pd.DataFrame:
    """Return PRAGMA table_info for a table (names with spaces are fine)."""
    return run_query(f"PRAGMA table_info({_quote_ident(name)})", conn=conn, show=show)


def table_columns(name: str, conn=None) -> List[str]:
    info = describe_table(name, conn=conn, show=False)
    if info.empty:
        return []
    return info["name"].tolist()


__all__ = ["run_query", "list_tables", "describe_table", "table_columns"]
