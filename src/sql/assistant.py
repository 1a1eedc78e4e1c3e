"""Prompting helpers for asking an AI assistant to write SQL."""

import re
from typing import Dict, List, Optional

from openai import OpenAI

from src.sql.runner import describe_table, list_tables
from src.utils.settings import get_setting

DEFAULT_MODEL = "gpt-4.1-mini"

PROMPTING_TIPS: List[Dict] = [
    {
        "title": "Mostre o schema",
        "body": (
            "O assistente não enxerga o seu banco. Cole os nomes das tabelas e colunas "
            "(ou a saída de PRAGMA table_info) no prompt para evitar colunas inventadas."
        ),
    },
    {
        "title": "Diga o dialeto",
        "body": (
            "SQLite, PostgreSQL e SQL Server têm funções diferentes para datas e texto. "
            "Peça explicitamente SQL compatível com SQLite."
        ),
    },
    {
        "title": "Descreva o resultado esperado",
        "body": (
            "Diga quais colunas quer ver, a ordenação e o limite de linhas. "
            "'Os 5 produtos mais caros com nome e preço' é melhor do que 'produtos caros'."
        ),
    },
    {
        "title": "Peça a explicação",
        "body": (
            "Peça para o assistente explicar cada JOIN e cada filtro. "
            "Se a explicação não bater com a pergunta, a consulta provavelmente também não bate."
        ),
    },
    {
        "title": "Confira antes de confiar",
        "body": (
            "Rode a consulta com LIMIT, confira algumas linhas manualmente e compare as contagens "
            "com um SELECT COUNT(*) simples antes de usar o resultado."
        ),
    },
]

_FENCE_RE = re.compile(r"```(?:sqlite|sql)?\s*(.*?)```", re.IGNORECASE | re.DOTALL)


def build_schema_summary(conn=None) -> str:
    """Summarize the live schema as one 'Table(col TYPE, ...)' line per table."""
    lines = []
    for table in list_tables(conn=conn):
        info = describe_table(table, conn=conn, show=False)
        cols = ", ".join(
            f"{row['name']} {row['type']}".strip() for _, row in info.iterrows()
        )
        lines.append(f"{table}({cols})")
    return "\n".join(lines)


def build_sql_prompt(question: str, schema: str) -> str:
    question = (question or "").strip()
    if not question:
        raise ValueError("Informe a pergunta que a consulta deve responder.")
    parts = [
        "Você é um assistente que escreve SQL para SQLite.",
        "Use apenas as tabelas e colunas do schema abaixo. Nomes com espaço devem ir entre aspas duplas.",
        "Responda com uma única consulta SELECT dentro de um bloco ```sql``` e, depois, explique cada JOIN e filtro.",
        "",
        "SCHEMA",
        schema.strip() or "(schema não informado)",
        "",
        "PERGUNTA",
        question,
    ]
    return "\n".join(parts)


def extract_sql(text: str) -> str:
    """Extract the SQL from an assistant reply, stripping markdown fences."""
    if not text:
        return ""
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def _response_text(response) -> str:
    if getattr(response, "output_text", None):
        return response.output_text.strip()
    output = getattr(response, "output", None) or []
    for bloco in output:
        conteudos = getattr(bloco, "content", None) or []
        for item in conteudos:
            texto = getattr(item, "text", None)
            texto = getattr(texto, "value", texto)
            if isinstance(texto, str) and texto:
                return texto.strip()
    return ""


def generate_sql(question: str, model: Optional[str] = None, conn=None, client=None) -> str:
    """Ask OpenAI for a SQLite query answering the question. The SQL is not executed."""
    if client is None:
        api_key = get_setting("OPENAI_API_KEY", "")
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY não encontrada (.env ou ambiente).")
        client = OpenAI(api_key=api_key)
    model = model or get_setting("SQL_TUTOR_MODEL", DEFAULT_MODEL)
    prompt = build_sql_prompt(question, build_schema_summary(conn=conn))
    response = client.responses.create(model=model, input=prompt)
    sql = extract_sql(_response_text(response))
    if not sql:
        raise RuntimeError(f"Sem resposta do modelo '{model}'.")
    return sql


__all__ = [
    "DEFAULT_MODEL",
    "PROMPTING_TIPS",
    "build_schema_summary",
    "build_sql_prompt",
    "extract_sql",
    "generate_sql",
]
