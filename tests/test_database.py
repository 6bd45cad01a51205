import sqlite3

import pytest

from sqlitelite.database import Database, open_database
from sqlitelite.record import lift_encoded_string

APPLES = [("Granny Smith", "Light Green"), ("Fuji", "Red")]


def _make_db(path, tables):
    conn = sqlite3.connect(path)
    conn.execute("PRAGMA page_size = 4096")
    for name, rows in tables.items():
        conn.execute(f"CREATE TABLE {name} (id integer primary key, name text, color text)")
        conn.executemany(f"INSERT INTO {name} (name, color) VALUES (?, ?)", rows)
    conn.commit()
    conn.close()


def test_open_database_decodes_rows(tmp_path):
    path = tmp_path / "fruit.db"
    _make_db(path, {"apples": APPLES})
    db = open_database(path)
    assert isinstance(db, Database)
    assert db.header.page_size == 4096
    assert len(db.record_cells) == 1
    rows = [record.cells for record in db.record_cells[0]]
    assert rows == [
        [None, b"Granny Smith", b"Light Green"],
        [None, b"Fuji", b"Red"],
    ]


def test_schema_signature_matches_columns(tmp_path):
    path = tmp_path / "fruit.db"
    _make_db(path, {"apples": APPLES})
    db = open_database(str(path))
    signature = db.schema_cells[0].column.sql.signature
    assert signature["name"] == (1, "text")
    index, _ = signature["color"]
    record = db.record_cells[0][1]
    assert lift_encoded_string(record.cells[index]) == b"Red"


def test_each_table_gets_its_own_row_list(tmp_path):
    path = tmp_path / "fruit.db"
    _make_db(path, {"apples": APPLES, "pears": [("Bosc", "Brown")]})
    db = open_database(path)
    assert len(db.schema_cells) == len(db.record_cells) == 2
    assert [len(rows) for rows in db.record_cells] == [2, 1]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_database(tmp_path / "absent.db")