import pytest

from logs_provider.apis.app import create_app
from logs_provider.db.context import Context
from logs_provider.db.models import Log
from logs_provider.db.services.log_service import LogService
from logs_provider.provider.logs_provider import LogsContentProvider
from logs_provider.provider.notifications import ChangeNotifier

AUTHORITY = "com.example.android.hilt.provider"
LOGS_URI = f"content://{AUTHORITY}/logs"

BASE_TS = 1_615_125_789_000


@pytest.fixture
def ctx(tmp_path):
    """Context bound to a fresh sqlite file for each test."""
    context = Context()
    context.init_session(f"sqlite:///{tmp_path / 'logs.db'}")
    context.create_tables()
    yield context
    context.session.close()
    context.drop_tables()
    context.engine.dispose()


@pytest.fixture
def session(ctx):
    return ctx.get_session()


@pytest.fixture
def log_service(ctx):
    return LogService()


@pytest.fixture
def notifier():
    return ChangeNotifier()


@pytest.fixture
def provider(log_service, notifier):
    return LogsContentProvider(log_service, notifier, authority=AUTHORITY)


@pytest.fixture
def seed_logs(ctx, log_service):
    """commit logs with the given messages, returns their ids in insert order"""

    def _seed(*msgs):
        with ctx.session_scope() as s:
            logs = [Log(msg=m, timestamp=BASE_TS + i) for i, m in enumerate(msgs)]
            log_service.insert_logs(*logs, session=s)
            ids = [log.id for log in logs]
        return ids

    return _seed


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.delenv("SQLALCHEMY_DATABASE_URI", raising=False)
    monkeypatch.delenv("LOGS_PROVIDER_AUTHORITY", raising=False)
    app = create_app({"database_uri": f"sqlite:///{tmp_path / 'api.db'}"})
    app.config.update(TESTING=True)
    yield app
    app.container.unwire()
    Context().session.close()
    Context().engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
