import pytest
import requests

import errors
from conftest import FakeResponse
from dispatcher import create_analytics, dispatch_all
from grammar import AnalyticsType


def test_create_analytics_request_shape(fake_post):
    create_analytics("abc123", 5, AnalyticsType.SVA, base_url="http://va:2001", timeout=30)

    call = fake_post.calls[0]
    assert call["url"] == "http://va:2001/api/v2/smart_va/analytics"
    assert call["headers"] == {"Content-Type": "application/json", "Authorization": "Bearer abc123"}
    assert call["json"]["stream_id"] == 5
    assert call["timeout"] == 30


def test_create_analytics_non_2xx(fake_post):
    fake_post.responses = [FakeResponse(409, '{"error": "exists"}')]
    with pytest.raises(errors.NonSuccessStatusError) as exc:
        create_analytics("t", 1, AnalyticsType.OD)
    assert exc.value.status_code == 409
    assert exc.value.body == '{"error": "exists"}'


def test_create_analytics_transport_failure(fake_post):
    fake_post.responses = [requests.ConnectionError("connection refused")]
    with pytest.raises(errors.TransportFailureError, match="connection refused"):
        create_analytics("t", 1, AnalyticsType.OD)


def test_dispatch_all_reports_every_id(fake_post, capsys):
    fake_post.responses = [
        FakeResponse(200),
        requests.Timeout("read timed out"),
        FakeResponse(500, "boom"),
        FakeResponse(204, ""),
    ]
    outcomes = dispatch_all("t", [3, 4, 5, 6], AnalyticsType.OD)

    assert [c["json"]["stream_id"] for c in fake_post.calls] == [3, 4, 5, 6]
    assert [o.ok for o in outcomes] == [True, False, False, True]
    assert [o.stream_id for o in outcomes] == [3, 4, 5, 6]

    out, err = capsys.readouterr()
    assert out.splitlines() == [
        "Successfully created analytics for stream 3.",
        "Successfully created analytics for stream 6.",
    ]
    assert "Failed to create analytics for stream 4: read timed out" in err
    assert "Failed to create analytics for stream 5. HTTP status: 500" in err
    assert "Response body: boom" in err


def test_dispatch_all_keeps_duplicates(fake_post):
    dispatch_all("t", [2, 2], AnalyticsType.SVA)
    assert len(fake_post.calls) == 2


# ---------- DEFAULTS ----------

@pytest.mark.parametrize("analytics_type, url", [
    (AnalyticsType.SVA, "http://localhost:2001/api/v2/smart_va/analytics"),
    (AnalyticsType.OD, "http://localhost:2001/api/v2/object_in_zone/analytics"),
])
def test_create_analytics_default_endpoint_and_timeout(fake_post, analytics_type, url):
    create_analytics("t", 1, analytics_type)
    assert fake_post.calls[0]["url"] == url
    assert fake_post.calls[0]["timeout"] == 30


def test_dispatch_all_uses_defaults(fake_post):
    dispatch_all("t", [1, 2], AnalyticsType.OD)
    assert {c["url"] for c in fake_post.calls} == {"http://localhost:2001/api/v2/object_in_zone/analytics"}
    assert {c["timeout"] for c in fake_post.calls} == {30}
