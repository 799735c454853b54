import pytest

from library_loans import check_database
from library_loans.config import _bool, _csv


def test_index_banner(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"API is working" in r.data


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_routes_lists_api_surface(client):
    rules = client.get("/routes").get_json()
    assert "/api/v1/loans" in rules
    assert "/api/v1/books/most-loaned" in rules
    assert "/api/v1/users/with-overdue" in rules


def test_cors_header_on_api(client):
    r = client.get("/api/v1/loans", headers={"Origin": "http://localhost:5500"})
    assert r.status_code == 200
    # flask-cors < 6 answers "*", newer releases echo the origin
    assert r.headers.get("Access-Control-Allow-Origin") in {"*", "http://localhost:5500"}


def test_loans_page_renders_with_api_url(client):
    r = client.get("/ui/")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert 'data-api-url="/api/v1"' in html
    assert "loans-table-body" in html
    assert "/static/js/app.js" in html


def test_static_client_modules_served(client):
    for path in ("/static/js/app.js", "/static/js/services/api.js", "/static/js/ui/ui.js"):
        r = client.get(path)
        assert r.status_code == 200
        r.close()


def test_check_database(app):
    assert check_database(app) is True


def test_config_helpers():
    assert _bool(None, default=True) is True
    assert _bool(" Yes ") is True
    assert _bool("0") is False
    assert _csv("checked out, returned,,overdue") == ("checked out", "returned", "overdue")
    assert _csv("") == ()


def test_mysql_url_escapes_credentials(monkeypatch):
    from sqlalchemy.engine import make_url
    from library_loans.config import _database_uri

    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "dbhost")
    monkeypatch.setenv("DB_USER", "library")
    monkeypatch.setenv("DB_PASSWORD", "p@ss/word:%")
    monkeypatch.setenv("DB_DATABASE", "library")

    url = make_url(_database_uri())
    assert url.drivername == "mysql+pymysql"
    assert url.host == "dbhost"
    assert url.username == "library"
    assert url.password == "p@ss/word:%"
    assert url.database == "library"


def test_database_url_takes_precedence(monkeypatch):
    from library_loans.config import _database_uri

    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("DB_HOST", "dbhost")
    assert _database_uri() == "sqlite:///elsewhere.db"


def test_server_pool_queues_without_timeout():
    pytest.importorskip("pymysql")
    from library_loans import create_app
    from library_loans.extensions import db

    # engine is built lazily per connection, nothing connects here
    app = create_app(config_overrides={
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "mysql+pymysql://u:p@localhost/x",
        "DB_POOL_SIZE": 4,
    })

    assert app.config["SQLALCHEMY_ENGINE_OPTIONS"]["max_overflow"] == 0
    with app.app_context():
        assert db.engine.pool.size() == 4
        assert db.engine.pool.timeout() is None
