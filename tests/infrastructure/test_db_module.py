"""Tests for the infrastructure.db module."""

from src.infrastructure import db as db_module


def test_get_db_url_reads_environment(monkeypatch):
    """_get_db_url should prefer MONEYFLOW_DB_URL."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("MONEYFLOW_DB_URL", "postgresql://moneyflow")

    assert db_module._get_db_url() == "postgresql://moneyflow"


def test_get_db_url_defaults_to_sqlite_file(monkeypatch, tmp_path):
    """Without configuration a SQLite file under data/ is used."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(db_module, "get_project_root", lambda: tmp_path)
    monkeypatch.delenv("MONEYFLOW_DB_URL", raising=False)

    url = db_module._get_db_url()

    assert url == f"sqlite:///{tmp_path / 'data' / 'moneyflow.db'}"
    assert (tmp_path / "data").is_dir()


def test_create_engine_passes_pool_configuration(monkeypatch):
    """Server databases get a QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://moneyflow")

    assert engine == "engine"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_create_engine_keeps_sqlite_defaults(monkeypatch):
    """SQLite URLs do not receive pool sizing arguments."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite:///moneyflow.db")

    assert "poolclass" not in captured["kwargs"]


def test_get_engine_caches_engine(monkeypatch):
    """get_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module, "_get_db_url", lambda: "sqlite://")

    engine_one = db_module.get_engine()
    engine_two = db_module.get_engine()

    assert engine_one is engine_two
    assert created == ["sqlite://"]


def test_adapter_prefers_injected_engine(monkeypatch):
    """The adapter returns its injected engine or the global one."""
    monkeypatch.setattr(db_module, "get_engine", lambda: "global_engine")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() == (
        "global_engine"
    )
    assert db_module.SqlAlchemyDatabaseEngineAdapter(
        "local_engine"
    ).get_engine() == "local_engine"


def _singleton_not_expected():
    raise AssertionError("the shared engine should not be used")


def test_adapter_builds_engine_for_configured_url(monkeypatch):
    """An explicit URL gets its own engine instead of the singleton."""
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module, "get_engine", _singleton_not_expected)
    adapter = db_module.SqlAlchemyDatabaseEngineAdapter(
        db_url="postgresql://moneyflow"
    )

    assert adapter.get_engine() == "engine:postgresql://moneyflow"
    assert adapter.get_engine() == "engine:postgresql://moneyflow"
    assert created == ["postgresql://moneyflow"]
