from typing import Any, Dict
from sqlalchemy import MetaData, Table
from sqlalchemy.engine import Connection


# A row of the `test` table, keyed by column name.
# Columns come from the database schema, not from this module.
Record = Dict[str, Any]


def reflect_test_table(
        bind: Connection,
        metadata: MetaData,
        table_name: str
    ) -> Table:
    '''
    Loads the columns of `table_name` from the database into `metadata`;
    a table already present in `metadata` is returned as is

    Raises `sqlalchemy.exc.NoSuchTableError` if the table does not exist
    '''

    return Table(table_name, metadata, autoload_with=bind)

def to_record(row: Any) -> Record:
    return dict(row._mapping)
