import os
import tempfile

# логи тестов не должны попадать в ./logs
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="va_creator_logs_"))
# умолчания config.py, а не окружение машины
for _name in ("VA_SERVER_URL", "VA_REQUEST_TIMEOUT", "LOG_LEVEL"):
    os.environ.pop(_name, None)

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=201, text='{"id": 1}'):
        self.status_code = status_code
        self.text = text


class RecordingPost:
    """Подмена requests.post: запоминает вызовы, отвечает по очереди из responses."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = list(responses or [])

    def __call__(self, url, json=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        result = self.responses.pop(0) if self.responses else FakeResponse()
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_post(monkeypatch):
    post = RecordingPost()
    monkeypatch.setattr(requests, "post", post)
    return post
