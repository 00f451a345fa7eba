import io

import pytest

from app import create_app
from config import ServerConfig


@pytest.fixture
def settings(tmp_path) -> ServerConfig:
    return ServerConfig(upload_dir=tmp_path / "uploads", show_qr=False)


@pytest.fixture
def flask_app(settings):
    return create_app(settings)


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def upload(client):
    def _upload(name, content: bytes, field: str = "file"):
        return client.post(
            "/upload",
            data={field: (io.BytesIO(content), name)},
            content_type="multipart/form-data",
        )

    return _upload
