from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "hr_records"
    charset: str = "utf8mb4"

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, object]) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` dict; missing keys keep the defaults."""
        known = {k: db_config[k] for k in ("host", "user", "password", "database", "charset") if db_config.get(k)}
        if db_config.get("port"):
            known["port"] = int(db_config["port"])
        return cls(**known)


class DatabaseConnection:
    """Hands out MySQL connections to the repositories.

    Each repository call opens its own connection and closes it when done,
    so one shared factory per settings is enough.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = cls(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        cfg = self._config
        return mysql.connector.connect(
            host=cfg.host,
            port=cfg.port,
            user=cfg.user,
            password=cfg.password,
            charset=cfg.charset,
            **({"database": cfg.database} if with_database else {}),
        )
