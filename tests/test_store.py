# tests/test_store.py
import pytest

import store.values as store_values
from store import (
    SCHEMA_PATH,
    apply_schema,
    delete_values,
    fetch_values,
    filter_known_fields,
    list_documents,
    path_key,
    split_statements,
    upsert_values,
)


class FakeCursor:
    def __init__(self, rows=None, rowcount=0):
        self.executed: list[tuple[str, tuple]] = []
        self.rows = rows or []
        self.rowcount = rowcount

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor

    def cursor(self):
        return self._cursor


@pytest.fixture
def batches(monkeypatch):
    recorded: list[list[tuple]] = []

    def fake_execute_values(cur, sql, rows):
        assert "ON CONFLICT" in sql
        recorded.append(list(rows))

    monkeypatch.setattr(store_values, "execute_values", fake_execute_values)
    return recorded


def test_path_key():
    assert path_key(["Продаж", "Замовлення"]) == "Продаж>Замовлення"
    assert path_key([]) == ""
    assert path_key(["a", "b"], separator="/") == "a/b"


def test_filter_known_fields(sample_report):
    form = sample_report.root.children[0].children[0].form
    values = filter_known_fields(form, {"сума": 150, "оплата": None, "невідоме": "x"})
    assert values == {"сума": "150", "оплата": ""}


def test_upsert_values(batches):
    cur = FakeCursor()
    n = upsert_values(FakeConnection(cur), ["A", "B"], {"x": "1", "y": "2"})
    assert n == 2
    assert batches == [[("A>B", "x", "1"), ("A>B", "y", "2")]]
    assert cur.executed == []


def test_upsert_values_with_custom_separator(batches):
    cur = FakeCursor()
    upsert_values(FakeConnection(cur), ["A", "B"], {"x": "1"}, separator="/")
    assert batches == [[("A/B", "x", "1")]]


def test_fetch_and_delete_use_separator():
    cur = FakeCursor()
    fetch_values(FakeConnection(cur), ["A", "B"], separator="/")
    delete_values(FakeConnection(cur), ["A", "B"], separator="/")
    assert [params for _, params in cur.executed] == [("A/B",), ("A/B",)]


def test_upsert_with_replace_deletes_first(batches):
    cur = FakeCursor()
    n = upsert_values(FakeConnection(cur), ["A"], {}, replace=True)
    assert n == 0
    assert batches == []
    assert len(cur.executed) == 1
    sql, params = cur.executed[0]
    assert sql.startswith("DELETE FROM form_value")
    assert params == ("A",)


def test_fetch_values():
    cur = FakeCursor(rows=[("klient", "ТОВ"), ("suma", "150")])
    assert fetch_values(FakeConnection(cur), ["A"]) == {"klient": "ТОВ", "suma": "150"}
    assert cur.executed[0][1] == ("A",)


def test_delete_values_returns_rowcount():
    cur = FakeCursor(rowcount=3)
    assert delete_values(FakeConnection(cur), ["A", "B"]) == 3


def test_list_documents():
    cur = FakeCursor(rows=[("A>B", 2), ("C", 1)])
    assert list_documents(FakeConnection(cur)) == [("A>B", 2), ("C", 1)]


def test_schema_file_splits_into_statements():
    stmts = split_statements(SCHEMA_PATH.read_text(encoding="utf-8"))
    assert len(stmts) == 2
    assert "CREATE TABLE IF NOT EXISTS form_value" in stmts[0]
    assert "UNIQUE (path_key, field_key)" in stmts[0]
    assert stmts[1].startswith("CREATE INDEX IF NOT EXISTS")


def test_trailing_comment_is_not_a_statement():
    assert split_statements("SELECT 1;\n-- koniec\n") == ["SELECT 1;"]


def test_unterminated_statement_is_kept():
    assert split_statements("SELECT 1;\nSELECT 2\n") == ["SELECT 1;", "SELECT 2"]


def test_apply_schema_runs_each_statement_in_autocommit():
    cur = FakeCursor()
    conn = FakeConnection(cur)
    n = apply_schema(conn, "-- tabela\nCREATE TABLE t (a int);\nCREATE INDEX i ON t (a);\n")
    assert n == 2
    assert conn.autocommit is True
    assert [sql for sql, _ in cur.executed] == [
        "-- tabela\nCREATE TABLE t (a int);",
        "CREATE INDEX i ON t (a);",
    ]


def test_connection_params_from_env(monkeypatch):
    from rcat._db import APPLICATION_NAME, connection_params

    monkeypatch.setenv("PGHOST", "db.local")
    monkeypatch.setenv("PGPORT", "6543")
    params = connection_params()
    assert params["host"] == "db.local"
    assert params["port"] == 6543
    assert params["application_name"] == APPLICATION_NAME
