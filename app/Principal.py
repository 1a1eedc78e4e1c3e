import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]  # raiz do projeto
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from app.components.cards import metric_card, status_chip
from app.components.sidebar import DEFAULT_MODULES, render_sidebar
from src.sql.lessons import LESSONS, TOPICS
from src.sql.runner import list_tables
from src.utils.database import get_conn
from src.utils.db_init import DB_PATH
from src.utils.settings import get_setting


def main():
    st.set_page_config(page_title="Principal", page_icon="🧰", layout="wide")
    render_sidebar(modules=DEFAULT_MODULES, default="Principal", show_selector=False)

    st.title("SQL Básico")
    st.caption("SELECT, WHERE e JOIN no banco de exemplo Northwind, com dicas para usar IA na escrita de SQL.")

    # Status DB
    tables = []
    try:
        with get_conn() as conn:
            tables = list_tables(conn=conn)
        db_status = ("ok", f"SQLite em {DB_PATH} • {len(tables)} tabela(s)")
    except Exception as e:
        db_status = ("error", f"Erro: {e}")

    # Status OpenAI
    api_key = get_setting("OPENAI_API_KEY")
    if api_key:
        masked = api_key[:4] + "..." + api_key[-4:] if len(api_key) > 8 else "***"
        oa_status = ("ok", f"OPENAI_API_KEY carregada ({masked})")
    else:
        oa_status = ("warn", "OPENAI_API_KEY não encontrada (.env); o assistente só monta o prompt")

    st.markdown("### Status")
    col1, col2 = st.columns(2)
    with col1:
        status_chip("Banco de dados", db_status[0], db_status[1])
    with col2:
        status_chip("OpenAI", oa_status[0], oa_status[1])

    st.markdown("### Conteúdo")
    cols = st.columns(len(TOPICS) + 1)
    for col, topic in zip(cols, TOPICS):
        with col:
            metric_card(topic, sum(1 for lesson in LESSONS if lesson["topic"] == topic), "lições")
    with cols[-1]:
        metric_card("Tabelas", len(tables), ", ".join(tables[:4]) + ("..." if len(tables) > 4 else ""))

    st.markdown("### Como navegar")
    st.info(
        "Use a lista de páginas na lateral (Lições, Playground, Assistente). "
        "O notebook notebooks/sql_basics.ipynb traz o mesmo conteúdo para rodar célula a célula."
    )


if __name__ == "__main__":
    main()
