import pytest


@pytest.fixture(scope="session")
def flask_app(tmp_path_factory):
    mp = pytest.MonkeyPatch()
    mp.setenv("DATA_DIR", str(tmp_path_factory.mktemp("data")))
    mp.setenv("DEFAULT_LANG", "")
    mp.setenv("URL_PREFIX", "")
    from app import app
    app.config["TESTING"] = True
    yield app
    mp.undo()


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture(autouse=True)
def _no_default_lang(monkeypatch):
    monkeypatch.delenv("NUMWORDS_LANG", raising=False)
