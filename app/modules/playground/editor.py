"""Free-form SQL playground."""

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.sql.runner import describe_table, list_tables, run_query
from src.utils.database import get_conn

DEFAULT_SQL = "SELECT * FROM Products LIMIT 5;"


def render_schema(conn):
    """Show each table's columns inside an expander."""
    with st.expander("Schema do banco", expanded=False):
        for table in list_tables(conn=conn):
            info = describe_table(table, conn=conn, show=False)
            st.markdown(f"**{table}**")
            st.dataframe(info[["name", "type", "pk"]], use_container_width=True, hide_index=True)


def render_playground():
    st.header("Playground SQL")
    sql = st.text_area("Consulta", value=DEFAULT_SQL, height=160, key="playground_sql")
    run_clicked = st.button("Executar", type="primary", key="playground_run")

    with get_conn() as conn:
        render_schema(conn)
        if not run_clicked:
            return
        if not sql.strip():
            st.warning("Escreva uma consulta antes de executar.")
            return
        try:
            df = run_query(sql, conn=conn, show=False)
        except Exception as e:
            st.error(f"Erro do SQLite: {e}")
            return

    st.success(f"{len(df)} linha(s) • {len(df.columns)} coluna(s)")
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "Baixar CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="resultado.csv",
        mime="text/csv",
        key="playground_csv",
    )


__all__ = ["render_playground", "DEFAULT_SQL"]
