from unittest.mock import patch

import pytest
import requests

from appenlight_reporter import APIClient


def test_post_signs_and_versions_request(make_response):
    client = APIClient("https://example.test/api/", "secret")

    with patch.object(client.session, "post", return_value=make_response()) as post:
        resp = client.post("reports", [{"message": "boom"}])

    assert resp.text == "OK"
    args, kwargs = post.call_args
    assert args[0] == "https://example.test/api/reports"
    assert kwargs["headers"] == {"X-appenlight-api-key": "secret"}
    assert kwargs["json"] == [{"message": "boom"}]
    assert kwargs["timeout"] is None

    prepared = requests.Request("POST", args[0], params=kwargs["params"]).prepare()
    assert prepared.url == "https://example.test/api/reports?protocol_version=0.5"


def test_post_propagates_transport_errors():
    client = APIClient("https://example.test/api/", "secret")

    with patch.object(client.session, "post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(requests.ConnectionError):
            client.post("reports", [])
