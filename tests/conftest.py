import copy
import pytest
from feltreport.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with predictable settings"""
    # Store original values
    original = {
        "USGS_REQUEST_URL": config.settings.USGS_REQUEST_URL,
        "USE_MOCK": config.settings.USE_MOCK,
        "NOTICE_DURATION_SECONDS": config.settings.NOTICE_DURATION_SECONDS,
        "LOCALE": config.settings.LOCALE,
        "SCREEN_WAIT_TIMEOUT": config.settings.SCREEN_WAIT_TIMEOUT,
    }

    # Never hit the real feed from tests unless a test patches the transport
    config.settings.USGS_REQUEST_URL = config.DEFAULT_USGS_REQUEST_URL
    config.settings.USE_MOCK = False
    config.settings.NOTICE_DURATION_SECONDS = 2.0
    config.settings.LOCALE = "en"
    config.settings.SCREEN_WAIT_TIMEOUT = 5

    yield

    # Restore original values
    for name, value in original.items():
        setattr(config.settings, name, value)

@pytest.fixture
def single_event_feed():
    """A USGS GeoJSON feed with one felt report"""
    return {
        "type": "FeatureCollection",
        "metadata": {"status": 200, "count": 1},
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "mag": 5.0,
                    "felt": 120,
                    "cdi": 6.1,
                    "title": "M 5.0 - 10km ENE of X",
                },
                "geometry": {"type": "Point", "coordinates": [0.0, 0.0, 10.0]},
                "id": "test0001",
            }
        ],
    }

@pytest.fixture
def empty_feed():
    """A USGS GeoJSON feed with no matching events"""
    return {"type": "FeatureCollection", "metadata": {"status": 200, "count": 0}, "features": []}

@pytest.fixture
def multi_event_feed(single_event_feed):
    feed = copy.deepcopy(single_event_feed)
    second = copy.deepcopy(feed["features"][0])
    second["properties"].update({"title": "M 6.2 - 3km N of Y", "felt": 900, "cdi": 7.3})
    feed["features"].append(second)
    feed["metadata"]["count"] = 2
    return feed
