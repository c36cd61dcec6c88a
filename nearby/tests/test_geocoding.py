from unittest.mock import MagicMock, patch

import httpx
import pytest

from nearby.errors import ResolutionUnavailable, UnresolvableLocation
from nearby.geo.coordinates import Coordinate
from nearby.geocoding import build_geocoder
from nearby.geocoding.cache import CachingGeocoder
from nearby.geocoding.config import GeocodingConfig
from nearby.geocoding.nominatim import NominatimGeocoder
from nearby.geocoding.static import StaticGeocoder, default_gazetteer

NOMINATIM_CONFIG = GeocodingConfig(
    provider="nominatim",
    base_url="https://nominatim.example.test/search",
    user_agent="nearby-tests",
    timeout=4.0,
    cache_ttl=0,
)


def _mock_response(payload) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    return response


def _http_client(mock_client_cls: MagicMock) -> MagicMock:
    return mock_client_cls.return_value.__enter__.return_value


# ── Static gazetteer ─────────────────────────────────────────────────────


def test_static_geocoder_ignores_case_and_spacing():
    geocoder = StaticGeocoder(default_gazetteer())
    assert geocoder.resolve("  UNION   square ") == Coordinate(37.7880, -122.4075)


def test_static_geocoder_unknown_place():
    geocoder = StaticGeocoder(default_gazetteer())
    with pytest.raises(UnresolvableLocation):
        geocoder.resolve("Nowhereville12345")


# ── Nominatim ────────────────────────────────────────────────────────────


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_returns_first_hit(mock_client_cls):
    _http_client(mock_client_cls).get.return_value = _mock_response([
        {"lat": "37.7749", "lon": "-122.4194", "display_name": "San Francisco"},
        {"lat": "40.0", "lon": "-75.0"},
    ])

    result = NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")

    assert result == Coordinate(37.7749, -122.4194)
    _, kwargs = _http_client(mock_client_cls).get.call_args
    assert kwargs["params"]["q"] == "San Francisco"
    assert kwargs["params"]["format"] == "jsonv2"


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_passes_caller_timeout(mock_client_cls):
    _http_client(mock_client_cls).get.return_value = _mock_response([{"lat": "1", "lon": "2"}])

    NominatimGeocoder(NOMINATIM_CONFIG).resolve("somewhere", timeout=1.5)
    assert mock_client_cls.call_args.kwargs["timeout"] == 1.5

    NominatimGeocoder(NOMINATIM_CONFIG).resolve("somewhere")
    assert mock_client_cls.call_args.kwargs["timeout"] == 4.0


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_no_results_is_unresolvable(mock_client_cls):
    _http_client(mock_client_cls).get.return_value = _mock_response([])

    with pytest.raises(UnresolvableLocation):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("Nowhereville12345")


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_timeout_is_unavailable(mock_client_cls):
    _http_client(mock_client_cls).get.side_effect = httpx.ReadTimeout("timed out")

    with pytest.raises(ResolutionUnavailable):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_connection_error_is_unavailable(mock_client_cls):
    _http_client(mock_client_cls).get.side_effect = httpx.ConnectError("refused")

    with pytest.raises(ResolutionUnavailable):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_http_status_error_is_unavailable(mock_client_cls):
    response = _mock_response([])
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "503 Service Unavailable", request=MagicMock(), response=MagicMock(),
    )
    _http_client(mock_client_cls).get.return_value = response

    with pytest.raises(ResolutionUnavailable):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_bad_json_is_unavailable(mock_client_cls):
    response = MagicMock()
    response.json.side_effect = ValueError("not json")
    _http_client(mock_client_cls).get.return_value = response

    with pytest.raises(ResolutionUnavailable):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")


@pytest.mark.parametrize(
    "payload",
    [
        {"error": "rate limited"},
        [{"lat": "not-a-number", "lon": "0"}],
        [{"lat": "95.0", "lon": "0"}],
        [{"display_name": "missing coordinates"}],
    ],
)
@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_malformed_payload_is_unavailable(mock_client_cls, payload):
    _http_client(mock_client_cls).get.return_value = _mock_response(payload)

    with pytest.raises(ResolutionUnavailable):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("San Francisco")


@patch("nearby.geocoding.nominatim.httpx.Client")
def test_nominatim_blank_query_skips_network(mock_client_cls):
    with pytest.raises(UnresolvableLocation):
        NominatimGeocoder(NOMINATIM_CONFIG).resolve("  ")
    mock_client_cls.assert_not_called()


# ── Cache ────────────────────────────────────────────────────────────────


def test_cache_hit_skips_inner_geocoder():
    inner = MagicMock()
    inner.resolve.return_value = Coordinate(1, 2)
    geocoder = CachingGeocoder(inner, ttl=60)

    assert geocoder.resolve("Union Square") == Coordinate(1, 2)
    assert geocoder.resolve("union  square") == Coordinate(1, 2)

    inner.resolve.assert_called_once()
    stats = geocoder.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1


def test_cache_does_not_remember_failures():
    inner = MagicMock()
    inner.resolve.side_effect = [ResolutionUnavailable("down"), Coordinate(1, 2)]
    geocoder = CachingGeocoder(inner, ttl=60)

    with pytest.raises(ResolutionUnavailable):
        geocoder.resolve("Union Square")
    assert geocoder.resolve("Union Square") == Coordinate(1, 2)
    assert inner.resolve.call_count == 2


def test_cache_expired_entries_are_refetched():
    inner = MagicMock()
    inner.resolve.return_value = Coordinate(1, 2)
    geocoder = CachingGeocoder(inner, ttl=0)

    geocoder.resolve("Union Square")
    geocoder.resolve("Union Square")
    assert inner.resolve.call_count == 2


def test_cache_forwards_timeout():
    inner = MagicMock()
    inner.resolve.return_value = Coordinate(1, 2)
    CachingGeocoder(inner).resolve("Union Square", timeout=3.0)
    inner.resolve.assert_called_once_with("Union Square", timeout=3.0)


# ── Factory ──────────────────────────────────────────────────────────────


def test_build_static_geocoder_with_cache():
    geocoder = build_geocoder(GeocodingConfig(provider="static", cache_ttl=60))
    assert isinstance(geocoder, CachingGeocoder)
    assert isinstance(geocoder.inner, StaticGeocoder)


def test_build_nominatim_without_cache():
    geocoder = build_geocoder(NOMINATIM_CONFIG)
    assert isinstance(geocoder, NominatimGeocoder)


def test_build_unknown_provider():
    with pytest.raises(ValueError):
        build_geocoder(GeocodingConfig(provider="carrier-pigeon"))
