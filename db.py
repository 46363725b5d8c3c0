"""
Storage adapter shared by every blueprint.

Queries are written once, with ``%s`` placeholders and MySQL DDL, and
rewritten on the fly for SQLite which expects ``?`` placeholders.
"""

import logging
import re
import sqlite3
from contextlib import contextmanager

import mysql.connector
from mysql.connector import pooling

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r'%s')

SQLITE_REWRITES = (
    ('AUTO_INCREMENT', 'AUTOINCREMENT'),
    ('INSERT IGNORE', 'INSERT OR IGNORE'),
)


class StorageError(Exception):
    """The database is unreachable, misconfigured, or rejected a statement."""


def is_select(sql):
    return sql.lstrip().upper().startswith('SELECT')


class Transaction:
    """Statements run through one connection and committed together."""

    def __init__(self, database, cursor):
        self._database = database
        self._cursor = cursor

    def execute(self, sql, params=()):
        self._cursor.execute(self._database.translate(sql), tuple(params))
        if is_select(sql):
            return [dict(row) for row in self._cursor.fetchall()]
        return self._cursor.rowcount


class Database:
    driver_errors = ()
    schema_ready = False

    def translate(self, sql):
        return sql

    def get_connection(self):
        raise NotImplementedError

    def cursor(self, conn):
        return conn.cursor()

    @contextmanager
    def transaction(self):
        try:
            conn = self.get_connection()
        except self.driver_errors as e:
            logger.error("Could not connect to database: %s", e)
            raise StorageError(str(e)) from e

        cur = self.cursor(conn)
        try:
            yield Transaction(self, cur)
            conn.commit()
        except self.driver_errors as e:
            conn.rollback()
            logger.error("Query failed: %s", e)
            raise StorageError(str(e)) from e
        except BaseException:
            conn.rollback()
            raise
        finally:
            cur.close()
            conn.close()

    def query(self, sql, params=()):
        """Run a single statement: rows as dicts for a SELECT, else the rowcount."""
        with self.transaction() as tx:
            return tx.execute(sql, params)


class SQLiteDatabase(Database):
    driver_errors = (sqlite3.Error,)

    def __init__(self, path):
        self.path = path

    def translate(self, sql):
        sql = PLACEHOLDER.sub('?', sql)
        for mysql_form, sqlite_form in SQLITE_REWRITES:
            sql = sql.replace(mysql_form, sqlite_form)
        return sql

    def get_connection(self):
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn


class MySQLDatabase(Database):
    driver_errors = (mysql.connector.Error,)

    def __init__(self, pool_name="milk_pool", pool_size=5, **connect_args):
        self.pool_name = pool_name
        self.pool_size = pool_size
        self.connect_args = connect_args
        self._pool = None

    @property
    def pool(self):
        # Created on first use so the app can start before the database is reachable.
        if self._pool is None:
            if not self.connect_args.get('host'):
                raise StorageError("MYSQL_HOST is missing. Configure the hosted database in the environment.")
            self._pool = pooling.MySQLConnectionPool(
                pool_name=self.pool_name,
                pool_size=self.pool_size,
                **self.connect_args
            )
        return self._pool

    def get_connection(self):
        return self.pool.get_connection()

    def cursor(self, conn):
        return conn.cursor(dictionary=True)
