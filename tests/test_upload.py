"""
Test suite for file uploads.
"""

import io

from jobboard.core.config import settings
from tests.conftest import auth_headers


def _upload(client, user, filename="resume.pdf", content=b"%PDF-1.4 resume", content_type="application/pdf"):
    return client.post(
        "/api/upload",
        files={"file": (filename, io.BytesIO(content), content_type)},
        headers=auth_headers(user),
    )


class TestUpload:

    def test_upload_returns_fetchable_url(self, client, candidate):
        response = _upload(client, candidate)

        assert response.status_code == 200
        url = response.json()["url"]
        assert url.startswith("http://testserver/uploads/")
        assert url.endswith("_resume.pdf")

        fetched = client.get(url.replace("http://testserver", ""))
        assert fetched.status_code == 200
        assert fetched.content == b"%PDF-1.4 resume"

    def test_path_components_are_stripped(self, client, candidate):
        response = _upload(client, candidate, filename="../../etc/my cv.pdf")

        assert response.status_code == 200
        assert response.json()["url"].endswith("_my_cv.pdf")

    def test_disallowed_extension(self, client, candidate):
        response = _upload(client, candidate, filename="script.exe", content_type="application/octet-stream")

        assert response.status_code == 400
        assert "not allowed" in response.json()["detail"]

    def test_file_too_large(self, client, candidate, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)

        response = _upload(client, candidate)

        assert response.status_code == 400
        assert "too large" in response.json()["detail"].lower()

    def test_missing_file(self, client, candidate):
        response = client.post("/api/upload", headers=auth_headers(candidate))

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_requires_authentication(self, client):
        response = client.post("/api/upload", files={"file": ("a.pdf", io.BytesIO(b"x"), "application/pdf")})

        assert response.status_code == 401
