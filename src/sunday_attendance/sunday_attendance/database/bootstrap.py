from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = (
    ("Sunday School Admin", "admin", "admin123", Role.ADMIN),
    ("Demo Teacher", "teacher", "teacher123", Role.TEACHER),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable whatever DB name is configured.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    return re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)


def split_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside of quoted strings."""
    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch == "\\" and quote:
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def _run_script(conn_factory: DatabaseConnection, sql: str) -> None:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in split_sql_statements(_strip_create_db_and_use(sql)):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(schema_path).read_text(encoding="utf-8"))
    logger.info("Applied schema %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(seed_path).read_text(encoding="utf-8"))
    logger.info("Applied seed %s", seed_path)


def ensure_demo_users(db_config: dict) -> None:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)
        for full_name, username, password, role in DEMO_ACCOUNTS:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE username=%s", (username,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE users SET full_name=%s, password_hash=%s, role=%s, is_active=1 WHERE username=%s",
                    (full_name, password_hash, role.value, username),
                )
            else:
                cur.execute(
                    "INSERT INTO users (full_name, username, password_hash, role) VALUES (%s, %s, %s, %s)",
                    (full_name, username, password_hash, role.value),
                )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
