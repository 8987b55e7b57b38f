from pathlib import Path

from src.class_tracker.class_tracker.database.bootstrap import iter_sql_statements, strip_create_db_and_use

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_split_respects_quotes_and_comments():
    sql = "-- header; ignored\nINSERT INTO t VALUES ('a;b');\nSELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'SELECT "x;y"',
        "SELECT 1",
    ]


def test_schema_file_drops_database_selection():
    sql = strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    assert any("CREATE TABLE IF NOT EXISTS students" in s for s in statements)
