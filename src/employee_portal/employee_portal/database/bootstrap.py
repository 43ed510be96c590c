from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector
from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)

DEMO_ADMIN_EMAIL = "admin@company.com"
DEMO_ADMIN_USER_NAME = "admin"
DEMO_ADMIN_PASSWORD = "admin12345"


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "employee_portal")),
    )


@contextmanager
def _connect(db_config: dict, *, with_database: bool = True):
    target = _as_target(db_config)
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        params["database"] = target.database
    conn = mysql.connector.connect(**params)
    try:
        yield conn
    finally:
        conn.close()


def strip_create_db_and_use(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the script.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';' outside quotes. '--' line comments are dropped."""

    buf: list[str] = []
    quote: Optional[str] = None
    escape = False
    lines = (line for line in sql.splitlines(keepends=True) if not line.lstrip().startswith("--"))

    for ch in "".join(lines):
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\" and quote:
            buf.append(ch)
            escape = True
            continue

        if ch in {"'", '"'}:
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
            buf.append(ch)
            continue

        if ch == ";" and quote is None:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_script(db_config: dict, sql: str) -> None:
    with _connect(db_config) as conn:
        cur = conn.cursor()
        for stmt in iter_sql_statements(strip_create_db_and_use(sql)):
            cur.execute(stmt)
        conn.commit()


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    with _connect(db_config, with_database=False) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _exec_script(db_config, Path(schema_path).read_text(encoding="utf-8"))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _exec_script(db_config, Path(seed_path).read_text(encoding="utf-8"))


def ensure_demo_accounts(
    db_config: dict,
    *,
    email: str = DEMO_ADMIN_EMAIL,
    user_name: str = DEMO_ADMIN_USER_NAME,
    password: str = DEMO_ADMIN_PASSWORD,
) -> None:
    """Upsert the demo admin with a hashed password. Employees register through the app."""

    with _connect(db_config) as conn:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(password)
        cur.execute("SELECT admin_id FROM admins WHERE email=%s", (email.lower(),))
        if cur.fetchone():
            cur.execute(
                "UPDATE admins SET user_name=%s, password_hash=%s WHERE email=%s",
                (user_name, password_hash, email.lower()),
            )
        else:
            cur.execute(
                "INSERT INTO admins(email, user_name, password_hash) VALUES(%s,%s,%s)",
                (email.lower(), user_name, password_hash),
            )
        conn.commit()
    logger.info("Demo admin %s ready", email)


def list_tables(db_config: dict) -> list[str]:
    with _connect(db_config) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
