import pytest

from sqlitelite.sql import (
    CreateTable,
    Select,
    SqlError,
    UnsupportedSqlError,
    parse,
    parse_create_table,
    parse_select,
)

CREATE_TABLE = (
    b"CREATE TABLE tablename (id integer primary key, butterscotch text,"
    b"strawberry text,chocolate text,pistachio text,coffee text)"
)
SELECT = b"SELECT butterscotch FROM pistachio"


def test_create_table_is_ok():
    table = parse(CREATE_TABLE)
    assert isinstance(table, CreateTable)
    assert len(table.signature) == 6
    assert sorted(position for position, _ in table.signature.values()) == list(range(6))


def test_create_table_name_matches():
    assert parse(CREATE_TABLE).name == "tablename"


def test_create_table_signature_matches():
    signature = parse(CREATE_TABLE).signature
    assert signature["id"][1] == "integer primary key"
    for column in ("butterscotch", "strawberry", "chocolate", "pistachio", "coffee"):
        assert signature[column][1] == "text"


def test_create_table_signature_positions():
    signature = parse(CREATE_TABLE).signature
    assert signature["id"][0] == 0
    assert signature["coffee"][0] == 5


def test_select_is_ok():
    assert parse(SELECT) == Select(query="butterscotch", source="pistachio")


def test_select_query_matches():
    assert parse(SELECT).query == "butterscotch"


def test_select_source_matches():
    assert parse(SELECT).source == "pistachio"


def test_parse_accepts_text():
    assert parse("select a from b") == Select(query="a", source="b")


def test_unsupported_statement():
    with pytest.raises(UnsupportedSqlError):
        parse(b"DROP TABLE x")


def test_invalid_utf8():
    with pytest.raises(SqlError):
        parse(b"\xff\xfe select")


def test_select_without_from():
    with pytest.raises(SqlError):
        parse("select butterscotch")


def test_parse_select_requires_prefix():
    with pytest.raises(SqlError):
        parse_select("update x")


def test_create_table_without_signature():
    with pytest.raises(SqlError):
        parse("create table lonely")


def test_parse_create_table_requires_prefix():
    with pytest.raises(SqlError):
        parse_create_table("select a from b")


def test_signature_stops_at_piece_without_type():
    table = parse_create_table("create table t (a text, b, c text)")
    assert table.signature == {"a": (0, "text")}
    assert table.name == "t"


def test_select_lowercases_statement():
    assert parse("SELECT Name FROM Apples") == Select(query="name", source="apples")