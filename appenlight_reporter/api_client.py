# api_client.py - signed HTTP client for the AppEnlight API, a thin wrapper around requests
import requests

API_KEY_HEADER = "X-appenlight-api-key"
PROTOCOL_VERSION = "0.5"


class APIClient:
    def __init__(self, endpoint, api_key, timeout=None):
        # endpoint is a prefix; api names are appended to it directly
        self.endpoint = endpoint
        self.api_key = api_key
        self.session = requests.Session()
        self.timeout = timeout

    def url(self, api_name):
        return f"{self.endpoint}{api_name}"

    def post(self, api_name, json_payload):
        headers = {API_KEY_HEADER: self.api_key}
        params = {"protocol_version": PROTOCOL_VERSION}
        return self.session.post(
            self.url(api_name), json=json_payload, params=params,
            headers=headers, timeout=self.timeout,
        )
