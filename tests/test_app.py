"""Tests for method filtering and the UI page."""
import pytest


@pytest.mark.parametrize("method", ["post", "put", "delete", "patch"])
@pytest.mark.parametrize("path", ["/goodreads-shelf?user_id=1", "/", "/anything"])
def test_only_get_is_allowed(client, upstream, method, path):
    response = getattr(client, method)(path)
    assert response.status_code == 405
    assert upstream.calls == []


@pytest.mark.parametrize("path", ["/", "/index.html", "/some/deep/path"])
def test_ui_page_on_other_paths(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Goodreads Random Book Picker" in response.text
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert "frame-ancestors 'none'" in response.headers["content-security-policy"]
