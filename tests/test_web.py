import pytest

from panchangam_view.service import PanchangamService
from panchangam_view.web import create_app


@pytest.fixture
def client(sample_path):
    app = create_app(PanchangamService(sample_path))
    app.testing = True
    return app.test_client()


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert "Panchangam loaded from panchangam.txt" in html
    assert 'id="samvatsaram">Vishwaavasu<' in html
    assert 'id="nak-current"' in html


def test_api(client):
    res = client.get("/api/panchangam")
    assert res.status_code == 200
    body = res.get_json()
    assert body["ok"] is True
    assert body["fields"]["masam"] == "Margashira"
    assert "tithi-next" in body["fields"]


def test_api_reports_load_failure(tmp_path):
    app = create_app(PanchangamService(str(tmp_path / "missing.txt")))
    res = app.test_client().get("/api/panchangam")
    assert res.status_code == 503
    body = res.get_json()
    assert body["ok"] is False
    assert body["status"] == "Error loading panchangam data. Check console."
    assert body["fields"] == {}


def test_index_shows_error_status(tmp_path):
    app = create_app(PanchangamService(str(tmp_path / "missing.txt")))
    html = app.test_client().get("/").get_data(as_text=True)
    assert "Error loading panchangam data. Check console." in html
    assert 'id="tithi-current"' not in html
