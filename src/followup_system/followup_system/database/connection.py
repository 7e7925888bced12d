from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    """Connection settings, built from the ``DB_CONFIG`` dict of a settings module."""

    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "followup_db"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        known = {k: db_config[k] for k in cls.__dataclass_fields__ if db_config.get(k) is not None}
        if "port" in known:
            known["port"] = int(known["port"])
        return cls(**known)


class DatabaseConnection:
    """Hands out a fresh mysql-connector connection per repository call."""

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = cls(config)
        return cls._instance

    def connect(self):
        return mysql.connector.connect(**asdict(self._config))
