from __future__ import annotations

import mysql.connector


class DatabaseConnection:
    """Opens one short-lived MySQL connection per repository call."""

    def __init__(self, *, host: str, port: int, user: str, password: str, database: str):
        self._params = {
            "host": host,
            "port": port,
            "user": user,
            "password": password,
            "database": database,
        }

    @classmethod
    def from_settings(cls, db_config: dict) -> "DatabaseConnection":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
        )

    def connect(self):
        return mysql.connector.connect(**self._params)
