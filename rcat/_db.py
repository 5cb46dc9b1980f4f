"""Połączenie z bazą wartości formularzy (PostgreSQL) z ustawień w .env / środowisku."""

from __future__ import annotations

import os
import pathlib

import psycopg2
from dotenv import load_dotenv

ENV_PATH = pathlib.Path(__file__).resolve().parent.parent / ".env"

APPLICATION_NAME = "rulecat"


def connection_params() -> dict[str, object]:
    """Parametry psycopg2.connect; PGCONNECT_TIMEOUT w sekundach (domyślnie 10)."""
    load_dotenv(ENV_PATH)
    return {
        "host":             os.getenv("PGHOST",     "localhost"),
        "port":             int(os.getenv("PGPORT", "5432")),
        "dbname":           os.getenv("PGDATABASE", "rulecat"),
        "user":             os.getenv("PGUSER",     "rulecat"),
        "password":         os.getenv("PGPASSWORD", "rulecat"),
        "connect_timeout":  int(os.getenv("PGCONNECT_TIMEOUT", "10")),
        "application_name": APPLICATION_NAME,
    }


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(**connection_params())
