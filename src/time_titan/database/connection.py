from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 5
    connection_timeout: int = 60

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "punch_db")),
            pool_size=int(db_config.get("pool_size", 5)),
            connection_timeout=int(db_config.get("connection_timeout", 60)),
        )


class DatabaseConnection:
    """Connection factory shared by the MySQL repositories.

    The pool is created on first use, so building the app does not need a
    reachable database. ``close()`` on a pooled connection hands it back.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> DBConfig:
        return self._config

    def _connect_args(self) -> dict:
        return {
            "host": self._config.host,
            "port": int(self._config.port),
            "user": self._config.user,
            "password": self._config.password,
            "database": self._config.database,
            "connection_timeout": int(self._config.connection_timeout),
        }

    def connect(self):
        if self._config.pool_size <= 0:
            return mysql.connector.connect(**self._connect_args())

        with self._lock:
            if self._pool is None:
                logger.info(
                    "DB: opening pool (%s) to %s:%s/%s as %s",
                    self._config.pool_size,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                    self._config.user,
                )
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="time_titan",
                    pool_size=int(self._config.pool_size),
                    **self._connect_args(),
                )
        return self._pool.get_connection()
