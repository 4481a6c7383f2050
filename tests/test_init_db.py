from sqlalchemy import create_engine, inspect

from app.core import config as config_module
from app.db import init_db as init_module


def test_init_db_creates_tables_for_sqlite_in_production(monkeypatch):
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
    monkeypatch.setattr(init_module, "engine", engine)
    monkeypatch.setattr(config_module.settings, "ENV", "production")
    monkeypatch.setattr(config_module.settings, "DATABASE_URL", "sqlite:///:memory:")

    init_module.init_db(drop_all=True)

    tables = inspect(engine).get_table_names()
    assert {"users", "skills", "swap_requests", "refresh_tokens"} <= set(tables)


def test_init_db_skips_tables_in_production_without_opt_in(monkeypatch):
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
    monkeypatch.setattr(init_module, "engine", engine)
    monkeypatch.setattr(config_module.settings, "ENV", "production")
    monkeypatch.setattr(config_module.settings, "DATABASE_URL", "mysql+pymysql://app:app@db:3306/skillswap")
    monkeypatch.setattr(config_module.settings, "AUTO_CREATE_TABLES", False)

    init_module.init_db()

    assert inspect(engine).get_table_names() == []


def test_init_db_creates_tables_when_auto_create_enabled(monkeypatch):
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
    monkeypatch.setattr(init_module, "engine", engine)
    monkeypatch.setattr(config_module.settings, "ENV", "production")
    monkeypatch.setattr(config_module.settings, "DATABASE_URL", "mysql+pymysql://app:app@db:3306/skillswap")
    monkeypatch.setattr(config_module.settings, "AUTO_CREATE_TABLES", True)

    init_module.init_db(drop_all=True)

    assert "swap_requests" in inspect(engine).get_table_names()
