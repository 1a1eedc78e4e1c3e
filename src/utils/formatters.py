"""Formatting helpers for query results and other display values."""

import pandas as pd


def format_table(df: pd.DataFrame) -> str:
    """Render a DataFrame as an aligned text table without the index."""
    if len(df.columns) == 0:
        return "(sem resultados)"
    if df.empty:
        header = "  ".join(str(col) for col in df.columns)
        return f"{header}\n(0 linhas)"
    return df.to_string(index=False)


__all__ = ["format_table"]
