"""Prompting advice and SQL generation with an AI assistant."""

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.sql.assistant import PROMPTING_TIPS, build_schema_summary, build_sql_prompt, generate_sql
from src.sql.runner import run_query
from src.utils.database import get_conn
from src.utils.settings import get_setting


def render_tips():
    st.subheader("Como pedir SQL para um assistente de IA")
    for idx, tip in enumerate(PROMPTING_TIPS, start=1):
        st.markdown(f"**{idx}. {tip['title']}:** {tip['body']}")


def render_assistant():
    """Render tips, the generated prompt and optional SQL generation."""
    st.header("Assistente de IA")
    render_tips()
    st.markdown("---")

    question = st.text_input("Pergunta", placeholder="Ex.: quais os 5 clientes com mais pedidos?", key="assistant_question")
    if not question.strip():
        st.info("Escreva uma pergunta para montar o prompt.")
        return

    with get_conn() as conn:
        schema = build_schema_summary(conn=conn)
    prompt = build_sql_prompt(question, schema)
    st.markdown("#### Prompt sugerido")
    st.code(prompt, language="markdown")

    if not get_setting("OPENAI_API_KEY"):
        st.caption("Defina OPENAI_API_KEY no .env para gerar a consulta direto daqui.")
        return
    if st.button("Gerar SQL", type="primary", key="assistant_generate"):
        try:
            with get_conn() as conn:
                sql = generate_sql(question, conn=conn)
                st.code(sql, language="sql")
                df = run_query(sql, conn=conn, show=False)
        except Exception as e:
            st.error(f"Não foi possível gerar/executar a consulta: {e}")
            return
        st.caption("Confira o resultado antes de confiar nele.")
        st.dataframe(df.head(50), use_container_width=True, hide_index=True)


__all__ = ["render_assistant"]
