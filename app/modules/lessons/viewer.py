"""Lesson viewer: prose, SQL and live results for each tutorial step."""

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.sql.lessons import TOPICS, lessons_by_topic
from src.sql.runner import run_query
from src.utils.database import get_conn


def render_lessons_module():
    """Render topic/lesson selectors and run the selected lesson query."""
    st.header("Lições de SQL")
    st.caption("SELECT, WHERE e JOIN sobre o banco de exemplo Northwind.")

    topic = st.radio("Tópico", TOPICS, horizontal=True, key="lesson_topic")
    lessons = lessons_by_topic(topic)
    lesson = st.selectbox(
        "Lição",
        lessons,
        format_func=lambda item: item["title"],
        key=f"lesson_select_{topic}",
    )

    st.subheader(lesson["title"])
    st.markdown(lesson["explanation"])
    st.code(lesson["sql"], language="sql")

    try:
        with get_conn() as conn:
            df = run_query(lesson["sql"], conn=conn, show=False)
    except Exception as e:
        st.error(f"Erro ao executar a lição: {e}")
        return
    st.caption(f"{len(df)} linha(s) • {len(df.columns)} coluna(s)")
    st.dataframe(df, use_container_width=True, hide_index=True)


__all__ = ["render_lessons_module"]
