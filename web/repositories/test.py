# Data access for the `test` table

import threading
from typing import List, Optional
from sqlalchemy import MetaData, Table, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from common.config.constants import TEST_TABLE, LOG_LEVEL
from common.utils.logutils import create_logger
from web.models import Record, reflect_test_table, to_record
from web.repositories.base import RecordRepository


class TestRepository(RecordRepository):
    '''
    Reads all rows of the `test` table through SQLAlchemy

    The table's columns are reflected from the database on first use
    and kept for the lifetime of the repository

    :params:
        `session_factory`: sqlalchemy sessionmaker
        `table_name`: str - name of the backing table
    '''

    __test__ = False # Skip pytest class

    def __init__(
            self,
            session_factory: sessionmaker,
            table_name: str = TEST_TABLE
        ):
        self.session_factory = session_factory
        self.table_name = table_name
        self.metadata = MetaData()
        self._table: Optional[Table] = None
        self._table_lock = threading.Lock()
        self.logger = create_logger(
            "web.repositories.test", log_level=LOG_LEVEL
        )

    def _get_table(self, db: Session) -> Table:
        if self._table is None:
            # Table() registers itself in metadata before its columns are loaded
            with self._table_lock:
                if self._table is None:
                    table = reflect_test_table(
                        db.connection(), self.metadata, self.table_name
                    )
                    self.logger.debug(
                        f"Reflected table {self.table_name}: "
                        f"{[col.name for col in table.columns]}"
                    )
                    self._table = table
        return self._table

    def find_all(self) -> List[Record]:
        '''
        Reads all rows from the table,
            ordered by primary key when the table has one
        '''

        try:
            with self.session_factory() as db:
                table = self._get_table(db)
                query = select(table)
                pk_cols = list(table.primary_key.columns)
                if pk_cols:
                    query = query.order_by(*pk_cols)
                rows = db.execute(query).all()
        except SQLAlchemyError as exc:
            self.logger.error(
                f"Failed reading table {self.table_name}: {exc!r}"
            )
            raise

        self.logger.debug(f"Read {len(rows)} rows from {self.table_name}")
        return [to_record(row) for row in rows]
