# sqlitelite

A small, read-only reader for SQLite database files. It decodes the
100-byte file header, the b-tree page that follows it on the first page,
the schema records stored there, and the records on every later page,
and answers a few simple questions about them.

## Installation

```
pip install .
```

## Command line

The `sqlitelite` command takes a database path and a command:

```
sqlitelite sample.db .dbinfo
sqlitelite sample.db .tables
sqlitelite sample.db "SELECT name FROM apples"
```

- `.dbinfo` prints the page size from the file header and, as
  "number of tables", the number of pages read after the first one.
- `.tables` prints the table name of each schema entry, one per line.
- Anything else is parsed as SQL (keywords are case-insensitive, and the
  whole statement is lower-cased). For `SELECT <column> FROM <table>`,
  every schema entry whose `CREATE TABLE` statement declares that column
  is paired with the page at the same position, and the text value in
  that column's position is printed for each record on the page. The
  table named after `FROM` is only used in diagnostics.

Diagnostics go to standard error, results to standard output. A
statement that cannot be parsed, is not a `SELECT`, or is a
`CREATE TABLE` is reported as an error and the exit status is 1. A file
that cannot be opened or read is reported on standard error and the
exit status stays 0.

## Library use

```python
from sqlitelite.database import open_database

db = open_database("sample.db")
print(db.header.page_size)
for schema in db.schema_cells:
    print(schema.column.table_name.decode("utf-8", "replace"))
```

`open_database` returns a `Database` with `header` (a `DatabaseHeader`),
`schema_cells` (a list of `SchemaRecord`) and `record_cells` (for each
later page, a list of `SerializedRecord` whose `cells` hold the decoded
values).

The lower-level pieces:

- `sqlitelite.binio` — `read_exact` and `read_one` for binary streams;
  a short stream raises `EOFError`.
- `sqlitelite.varint` — `read_varint` and the `Varint` type for
  big-endian variable-length integers (`Varint.value()`, `int()`, `len()`).
- `sqlitelite.sql` — `parse`, `parse_select` and `parse_create_table`,
  returning `Select` or `CreateTable`; errors raise `SqlError` or
  `UnsupportedSqlError`.
- `sqlitelite.record` — `read_header`, `read_value`, `read_raw_column`,
  `read_record`, `serialize_record`, `lift_encoded_string`, `lift_int8`
  and the serial-type helpers; malformed data raises `RecordError`.
- `sqlitelite.schema` — `SchemaColumn` (built with
  `SchemaColumn.from_values`, summarised with `describe()`) and
  `SchemaRecord`.
- `sqlitelite.btree` — `PageType`, `PageHeader`, `read_page_header`,
  `read_cell_pointers`, `read_leaf_table_cell`, `read_page`,
  `parse_cell`, `read_root` and `read_tail`.
- `sqlitelite.header` — `read_database_header` and `DatabaseHeader`.
- `sqlitelite.page` — `read_root_page`, `read_cells` and `PageCells`,
  which iterates over pairs of schema entry and page cells.

## Limitations

- It only reads; nothing is ever written to a database file.
- Pages are read one after another in file order; the b-tree is not
  walked through interior pages, and pages are not looked up by a
  table's root page number. Reading stops at the first page that cannot
  be decoded, which includes any interior or index page that holds cells.
- Only table leaf cells whose payload fits on the page are decoded;
  overflow pages are not followed.
- Record values may be NULL, 8-bit integers or text; any other serial
  type is rejected and the record is skipped.
- The SQL support covers only `SELECT <column> FROM <table>` queries and
  the `CREATE TABLE` statements found in the schema. There is no
  `WHERE`, no expressions, no `COUNT`, and no index use.

## Running the tests

```
pip install .[test]
pytest
```