from typing import Any, Dict, Optional
from feltreport.core.config import settings
from feltreport.fetch.requests_fetcher import RequestsFetcher
from feltreport.fetch.utils import extract_feature_from_json, is_usable_url
from feltreport.schemas import Event

class FeedError(Exception):
    """The feed answered, but not with a usable GeoJSON document."""

def fetch_feed(url: str) -> Dict[str, Any]:
    """Fetch the raw GeoJSON feed. Blocking; call it off the event loop."""
    # Mock mode for testing
    if settings.USE_MOCK:
        return _mock_feed(url)

    result = RequestsFetcher().fetch(
        url, timeout_sec=(settings.CONNECT_TIMEOUT, settings.READ_TIMEOUT)
    )
    if not result.ok:
        raise FeedError(f"HTTP error {result.status_code} for {url}")
    if result.payload is None:
        raise FeedError(f"Empty or non-JSON response from {url}")

    print(f"FEED RECEIVED: {len(result.text or '')} characters from {result.final_url}")
    return result.payload

def fetch_earthquake_data(url: Optional[str]) -> Optional[Event]:
    """
    Query the USGS feed and return the first felt report.

    Never raises: network errors, bad status codes, malformed payloads and
    empty result sets all come back as None.
    """
    if not is_usable_url(url):
        print(f"SKIPPING FETCH - unusable URL: {url!r}")
        return None

    try:
        print(f"FETCHING {url}")
        payload = fetch_feed(url)
        event = extract_feature_from_json(payload)
        if event is None:
            print(f"NO EARTHQUAKE DATA in feed from {url}")
        return event
    except Exception as e:
        print(f"ERROR fetching {url}: {str(e)}")
        return None

def _mock_feed(url: str) -> Dict[str, Any]:
    """Canned feed for running without network access"""
    return {
        "type": "FeatureCollection",
        "metadata": {
            "generated": 1462233600000,
            "url": url,
            "title": "USGS Earthquakes",
            "status": 200,
            "api": "1.5.2",
            "count": 1,
        },
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "mag": 7.8,
                    "place": "27km SSE of Muisne, Ecuador",
                    "time": 1460851716000,
                    "felt": 728,
                    "cdi": 8.4,
                    "mmi": 8.99,
                    "type": "earthquake",
                    "title": "M 7.8 - 27km SSE of Muisne, Ecuador",
                },
                "geometry": {"type": "Point", "coordinates": [-79.9417, 0.3819, 20.59]},
                "id": "us20005j32",
            }
        ],
    }
