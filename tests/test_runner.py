from __future__ import annotations

import sqlite3

import pandas as pd
import pytest

from src.sql import runner
from src.utils import database
from src.utils.formatters import format_table


def _pragma_columns(conn, table):
    return [row[1] for row in conn.execute(f'PRAGMA table_info("{table}")')]


def test_products_limit_five_matches_declared_schema(conn):
    df = runner.run_query("SELECT * FROM Products LIMIT 5", conn=conn, show=False)

    assert len(df) == 5
    assert list(df.columns) == _pragma_columns(conn, "Products")


def test_shape_matches_engine_result(conn):
    sql = (
        "SELECT p.ProductName, c.CategoryName, p.UnitPrice "
        "FROM Products p JOIN Categories c ON c.CategoryID = p.CategoryID"
    )
    cur = conn.execute(sql)
    expected_rows = cur.fetchall()
    expected_cols = [d[0] for d in cur.description]

    df = runner.run_query(sql, conn=conn, show=False)

    assert df.shape == (len(expected_rows), len(expected_cols))
    assert list(df.columns) == expected_cols
    assert [tuple(r) for r in df.itertuples(index=False)] == expected_rows


def test_printed_table_has_each_header_once_and_values_in_order(conn, capsys):
    df = runner.run_query(
        "SELECT ProductName, QuantityPerUnit, CategoryID FROM Products ORDER BY ProductID",
        conn=conn,
    )
    out = capsys.readouterr().out
    lines = out.strip().splitlines()

    for header in ("ProductName", "QuantityPerUnit", "CategoryID"):
        assert out.count(header) == 1
    assert len(lines) == len(df) + 1

    first = lines[1]
    assert first.index("Chai") < first.index("10 boxes x 20 bags") < first.rindex("1")


def test_returns_same_frame_that_was_printed(conn, capsys):
    df = runner.run_query("SELECT CategoryName FROM Categories ORDER BY CategoryID", conn=conn)
    out = capsys.readouterr().out

    assert out == format_table(df) + "\n"
    assert df["CategoryName"].tolist() == ["Beverages", "Condiments", "Confections"]


def test_show_false_prints_nothing(conn, capsys):
    runner.run_query("SELECT 1 AS one", conn=conn, show=False)
    assert capsys.readouterr().out == ""


def test_malformed_query_raises_native_error(conn):
    with pytest.raises(sqlite3.OperationalError):
        runner.run_query("SELEC * FROM Products", conn=conn, show=False)


def test_missing_table_raises_native_error(conn):
    with pytest.raises(sqlite3.OperationalError, match="no such table"):
        runner.run_query("SELECT * FROM Produtos", conn=conn, show=False)


def test_duplicate_column_names_are_kept(conn):
    df = runner.run_query("SELECT 1 AS a, 2 AS a", conn=conn, show=False)
    assert list(df.columns) == ["a", "a"]


def test_statement_without_result_set_returns_empty_frame(conn):
    df = runner.run_query("CREATE TEMP TABLE scratch (x INTEGER)", conn=conn, show=False)
    assert df.empty
    assert len(df.columns) == 0


def test_empty_result_keeps_columns(conn, capsys):
    df = runner.run_query("SELECT ProductName FROM Products WHERE UnitPrice > 1000", conn=conn)
    assert df.empty
    assert list(df.columns) == ["ProductName"]
    assert "(0 linhas)" in capsys.readouterr().out


def test_uses_session_connection_when_conn_omitted(sample_db):
    df = runner.run_query("SELECT COUNT(*) AS n FROM Products", show=False)
    assert df["n"].tolist() == [7]
    first = database.get_session_conn()
    assert database.get_session_conn() is first


def test_close_session_conn_is_idempotent(sample_db):
    database.get_session_conn()
    database.close_session_conn()
    database.close_session_conn()
    assert database._SESSION_CONN is None


def test_list_and_describe_tables(conn):
    tables = runner.list_tables(conn=conn)
    assert tables == sorted(tables)
    assert "Order Details" in tables
    assert not any(t.startswith("sqlite_") for t in tables)

    info = runner.describe_table("Order Details", conn=conn, show=False)
    assert info["name"].tolist() == ["OrderID", "ProductID", "UnitPrice", "Quantity", "Discount"]
    assert runner.table_columns("Products", conn=conn) == _pragma_columns(conn, "Products")


def test_table_columns_of_unknown_table_is_empty(conn):
    assert runner.table_columns("Nope", conn=conn) == []


def test_format_table_without_columns():
    assert format_table(pd.DataFrame()) == "(sem resultados)"


def test_connections_are_read_only(sample_db):
    conn = database.get_session_conn()
    with pytest.raises(sqlite3.OperationalError, match="readonly"):
        runner.run_query("DROP TABLE Products", conn=conn, show=False)

    with database.get_conn() as short_lived:
        with pytest.raises(sqlite3.OperationalError, match="readonly"):
            runner.run_query("ALTER TABLE Customers ADD COLUMN Extra TEXT", conn=short_lived, show=False)

    assert runner.table_columns("Products", conn=conn)
    assert "Extra" not in runner.table_columns("Customers", conn=conn)
