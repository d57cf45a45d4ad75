from src.hrms.hrms.database.bootstrap import iter_sql_statements, strip_create_db_and_use


def test_splits_statements_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");SELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_skips_line_comments_and_empty_statements():
    sql = "-- header; with semicolon\nCREATE TABLE a (id INT);\n;\n"

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (id INT)"]


def test_double_dash_without_space_is_an_expression():
    sql = "UPDATE t SET a = a--1;\nSELECT 1; --\n-- trailing note\n"

    assert list(iter_sql_statements(sql)) == ["UPDATE t SET a = a--1", "SELECT 1"]


def test_escaped_quote_does_not_end_string():
    sql = "INSERT INTO t VALUES ('it\\'s; fine');"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('it\\'s; fine')"]


def test_strips_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (id INT);\n"

    assert list(iter_sql_statements(strip_create_db_and_use(sql))) == ["CREATE TABLE a (id INT)"]
