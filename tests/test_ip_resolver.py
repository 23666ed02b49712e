"""
Tests for IP address resolution and its caching rules.
"""

import httpx

from conftest import FakeProvider, http_error, ok
from weather_lookup.entities import ProviderError, ProviderResult
from weather_lookup.services import IpResolver

IP = "1.2.3.4"
KEY = f"ip:{IP}"


def make_resolver(store, provider):
    return IpResolver(cache=store, provider=provider, ttl=86400)


def test_blank_ip_returns_none_without_cache_access(store):
    provider = FakeProvider(ok({"city": "X"}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(None) is None
    assert resolver.resolve("") is None
    assert resolver.resolve("   ") is None
    assert provider.calls == []
    assert len(store) == 0


def test_cached_value_is_returned_without_provider_call(store):
    store.write(KEY, "cached!", ttl=60)
    provider = FakeProvider(ok({"city": "Other"}))

    assert make_resolver(store, provider).resolve(IP) == "cached!"
    assert provider.calls == []


def test_strips_whitespace_before_lookup(store):
    provider = FakeProvider(ok({"city": "TrimCity"}))

    assert make_resolver(store, provider).resolve("  1.2.3.4  ") == "TrimCity"
    assert provider.calls == [IP]
    assert store.read(KEY) == "TrimCity"


def test_prefers_postal_over_city(store):
    provider = FakeProvider(ok({"postal": "12345", "city": "TestCity"}))

    assert make_resolver(store, provider).resolve(IP) == "12345"
    assert store.read(KEY) == "12345"


def test_falls_back_to_city(store):
    provider = FakeProvider(ok({"city": "TestCity"}))

    assert make_resolver(store, provider).resolve(IP) == "TestCity"


def test_empty_result_is_cached_as_none(store):
    provider = FakeProvider(ok({}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(IP) is None
    assert store.exists(KEY)
    assert store.read(KEY) is None

    assert resolver.resolve(IP) is None
    assert provider.calls == [IP]


def test_error_payload_is_cached_as_none(store):
    provider = FakeProvider(ok({"error": True, "reason": "Reserved IP Address", "city": "Ignored"}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(IP) is None
    assert store.exists(KEY)


def test_http_failure_is_not_cached(store):
    provider = FakeProvider(http_error(500), ok({"city": "Recovered"}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(IP) is None
    assert not store.exists(KEY)

    assert resolver.resolve(IP) == "Recovered"
    assert provider.calls == [IP, IP]


def test_malformed_body_is_not_cached(store):
    provider = FakeProvider(ProviderResult.failure(ProviderError.MALFORMED_BODY, "Invalid JSON body"))

    assert make_resolver(store, provider).resolve(IP) is None
    assert not store.exists(KEY)


def test_exception_is_absorbed_and_not_cached(store, caplog):
    provider = FakeProvider(httpx.ConnectError("boom!"), ok({"city": "Later"}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(IP) is None
    assert not store.exists(KEY)
    assert "boom!" in caplog.text

    assert resolver.resolve(IP) == "Later"
    assert len(provider.calls) == 2


def test_cached_entry_expires_after_ttl(store, clock):
    provider = FakeProvider(ok({"city": "First"}), ok({"city": "Second"}))
    resolver = make_resolver(store, provider)

    assert resolver.resolve(IP) == "First"
    clock.advance(86400)
    assert resolver.resolve(IP) == "Second"


class ExpiringBetweenCallsStore:
    """Reports the key as present once, then as expired."""

    def __init__(self) -> None:
        self.answers = [True, False]
        self.writes = []

    def exists(self, key):
        return self.answers.pop(0) if self.answers else False

    def read(self, key):
        return None

    def write(self, key, value, ttl):
        self.writes.append((key, value))

    def health_check(self):
        return True


def test_entry_expiring_between_exists_and_read_is_a_miss():
    store = ExpiringBetweenCallsStore()
    provider = FakeProvider(ok({"city": "Fresh"}))

    assert make_resolver(store, provider).resolve(IP) == "Fresh"
    assert provider.calls == [IP]
    assert store.writes == [(KEY, "Fresh")]
