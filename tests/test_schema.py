import pytest

from sqlitelite.record import RecordError
from sqlitelite.schema import SchemaColumn
from sqlitelite.sql import SqlError

SQL = b"CREATE TABLE apples (id integer primary key, name text)"


def _values(sql=SQL, rootpage=2):
    return [b"table", b"apples", b"apples", rootpage, sql]


def test_from_values_builds_entry():
    column = SchemaColumn.from_values(_values())
    assert column.type == b"table"
    assert column.name == b"apples"
    assert column.table_name == b"apples"
    assert column.rootpage == 2
    assert column.sql.name == "apples"
    assert column.sql.signature["id"] == (0, "integer primary key")
    assert column.sql.signature["name"] == (1, "text")


def test_from_values_too_few():
    with pytest.raises(RecordError, match="ran out"):
        SchemaColumn.from_values(_values()[:4])


def test_from_values_wrong_rootpage_kind():
    with pytest.raises(RecordError):
        SchemaColumn.from_values(_values(rootpage=b"2"))


def test_from_values_wrong_name_kind():
    values = _values()
    values[1] = None
    with pytest.raises(RecordError):
        SchemaColumn.from_values(values)


def test_from_values_select_is_not_create_table():
    with pytest.raises(RecordError, match="create-table"):
        SchemaColumn.from_values(_values(sql=b"SELECT a FROM b"))


def test_from_values_unsupported_sql():
    with pytest.raises(SqlError):
        SchemaColumn.from_values(_values(sql=b"DROP TABLE apples"))


def test_describe_lists_fields():
    text = SchemaColumn.from_values(_values()).describe()
    lines = text.splitlines()
    assert lines[0] == "TYPE=table"
    assert "TABLE_NAME=apples" in lines
    assert "ROOTPAGE=2" in lines
    assert lines[-1].startswith("SQL=")