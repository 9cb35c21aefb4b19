import pytest
from fastapi.testclient import TestClient

from csv2table.config import Settings, get_settings
from csv2table.main import app
from csv2table.routes import get_block_converter
from csv2table.service import BlockTableConverter


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root(client: TestClient) -> None:
    resp = client.get("/")

    assert resp.status_code == 200
    assert "message" in resp.json()


def test_health(client: TestClient) -> None:
    assert client.get("/api/health").json() == {"status": "ok"}


def test_parse_returns_rows(client: TestClient) -> None:
    resp = client.post("/api/parse", json={"text": 'a,b\r\n"c,d",e'})

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "rows": [["a", "b"], ["c,d", "e"]]}


def test_parse_blank_text_returns_no_rows(client: TestClient) -> None:
    resp = client.post("/api/parse", json={"text": "  \n"})

    assert resp.status_code == 200
    assert resp.json()["rows"] == []


def test_parse_requires_text(client: TestClient) -> None:
    assert client.post("/api/parse", json={}).status_code == 422


def test_html_conversion(client: TestClient) -> None:
    resp = client.post("/api/html", json={"text": "x,y\n1,2"})
    body = resp.json()

    assert resp.status_code == 200
    assert body["ok"] is True
    assert body["rows"] == [["x", "y"], ["1", "2"]]
    assert body["markup"] == (
        '<table class="csv-table"><thead><tr><th>x</th><th>y</th></tr></thead>'
        "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
    )
    assert body["preview"] == body["markup"]
    assert "\n  <tbody>\n" in body["formatted"]


def test_html_conversion_with_options(client: TestClient) -> None:
    resp = client.post(
        "/api/html",
        json={"text": "x,y", "options": {"has_header": False, "class_name": "wide"}},
    )

    assert resp.json()["markup"] == '<table class="wide"><tbody><tr><td>x</td><td>y</td></tr></tbody></table>'


def test_html_default_class_comes_from_settings(client: TestClient) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(table_class="from-settings")

    resp = client.post("/api/html", json={"text": "x"})

    assert resp.json()["markup"].startswith('<table class="from-settings">')


def test_block_conversion(client: TestClient) -> None:
    resp = client.post(
        "/api/block",
        json={"text": "a,b", "options": {"has_header": False, "has_fixed_layout": False, "has_stripes": True}},
    )
    body = resp.json()

    assert resp.status_code == 200
    assert body["markup"] == (
        "<!-- wp:table -->\n"
        '<figure class="wp-block-table"><table class="has-stripes"><tbody><tr><td>a</td><td>b</td></tr></tbody></table></figure>\n'
        "<!-- /wp:table -->"
    )
    assert body["preview"] == '<table class="has-stripes"><tbody><tr><td>a</td><td>b</td></tr></tbody></table>'


@pytest.mark.parametrize("path", ["/api/html", "/api/block"])
def test_blank_text_is_bad_request(client: TestClient, path: str) -> None:
    resp = client.post(path, json={"text": "   "})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please enter CSV data"


@pytest.mark.parametrize("path", ["/api/html", "/api/block"])
def test_no_data_is_unprocessable(client: TestClient, path: str) -> None:
    resp = client.post(path, json={"text": ",\n,"})

    assert resp.status_code == 422
    assert resp.json()["detail"] == "No valid data to display"


def test_unexpected_error_is_reported_generically(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    def broken_parse(text: str):
        raise RuntimeError("boom")

    app.dependency_overrides[get_block_converter] = lambda: BlockTableConverter(parser=broken_parse)

    resp = client.post("/api/block", json={"text": "a,b"})

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Error processing CSV data"
    assert "block conversion failed" in caplog.text


def test_parse_trims_byte_order_mark_and_keeps_quoted_newlines(client: TestClient) -> None:
    resp = client.post("/api/parse", json={"text": '\ufeffh1,h2\n"multi\nline",x'})

    assert resp.status_code == 200
    assert resp.json()["rows"] == [["h1", "h2"], ["multi\nline", "x"]]
