"""
Tests for the upstream HTTP clients, using httpx.MockTransport.
"""

import httpx
import pytest

from weather_lookup.entities import ProviderError
from weather_lookup.repositories import IpApiClient, WeatherApiClient, ZipcodebaseClient


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_ipapi_lookup_path():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"ip": "8.8.8.8", "city": "Mountain View", "postal": "94043"})

    client = IpApiClient(base_url="https://ipapi.test/", client=mock_client(handler))
    result = client.lookup("8.8.8.8")

    assert result.ok
    assert result.payload["postal"] == "94043"
    assert str(seen[0]) == "https://ipapi.test/8.8.8.8/json/"


def test_zipcodebase_search_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"results": {"10001": []}})

    client = ZipcodebaseClient(api_key="secret", base_url="https://zip.test/api/v1", client=mock_client(handler))
    result = client.search("10001")

    assert result.ok
    assert seen[0].path == "/api/v1/search"
    assert seen[0].params["codes"] == "10001"
    assert seen[0].params["apikey"] == "secret"


def test_weatherapi_forecast_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"location": {}})

    client = WeatherApiClient(api_key="k", base_url="https://weather.test/v1", days=2, client=mock_client(handler))
    client.forecast("London")

    params = seen[0].params
    assert seen[0].path == "/v1/forecast.json"
    assert (params["key"], params["q"], params["days"], params["aqi"]) == ("k", "London", "2", "no")


def test_non_success_status_is_tagged():
    client = IpApiClient(base_url="https://ipapi.test", client=mock_client(lambda r: httpx.Response(500)))

    result = client.lookup("1.2.3.4")

    assert not result.ok
    assert result.error is ProviderError.HTTP_STATUS
    assert result.status_code == 500
    assert result.detail == "HTTP error 500: Internal Server Error"


@pytest.mark.parametrize("body", [b"not_json", b"[1, 2]"])
def test_malformed_body_is_tagged(body):
    client = IpApiClient(base_url="https://ipapi.test", client=mock_client(lambda r: httpx.Response(200, content=body)))

    result = client.lookup("1.2.3.4")

    assert result.error is ProviderError.MALFORMED_BODY


def test_transport_error_is_tagged():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = WeatherApiClient(api_key="k", base_url="https://weather.test/v1", client=mock_client(handler))
    result = client.forecast("London")

    assert result.error is ProviderError.TRANSPORT
    assert "connection refused" in result.detail


def test_close_is_idempotent():
    client = IpApiClient(base_url="https://ipapi.test", client=mock_client(lambda r: httpx.Response(200, json={})))

    client.close()
    client.close()
