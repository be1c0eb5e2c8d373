from imageref import __version__
from imageref.config import config


def test_v1_root(client):
    resp = client.get("/v1/")
    assert resp.status_code == 200
    assert resp.get_json() == {"service": "imageref", "version": __version__}


def test_get_reference(client):
    resp = client.get("/v1/references/debian:8.2")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "name": "debian:8.2",
        "repository": "index.docker.io/library/debian",
        "registry": "index.docker.io",
        "scheme": "https",
        "short_name": "library/debian",
        "remote": "index.docker.io/library/debian:8.2",
        "tag": "8.2",
    }


def test_get_reference_with_registry_and_digest(client, digest):
    resp = client.get(f"/v1/references/localhost:5000/team/app@{digest}")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["registry"] == "localhost:5000"
    assert data["tag"] == digest


def test_get_reference_invalid_format(client):
    resp = client.get("/v1/references/Ubuntu")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_format"


def test_get_reference_syntax_error(client):
    resp = client.get("/v1/references/ubuntu:-bad")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "syntax_error"


def test_get_reference_too_long(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_REFERENCE_LENGTH", 10)
    resp = client.get("/v1/references/averylongimagename")
    assert resp.status_code == 400
    assert "1-10 characters" in resp.get_json()["message"]


def test_get_reference_bad_digest_is_client_error(client):
    resp = client.get("/v1/references/ubuntu@sha256:zz")
    assert resp.status_code == 400
    assert "not a valid repository/tag" in resp.get_json()["message"]
