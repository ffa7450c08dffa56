from typing import Any, Dict, Optional

from feltreport.schemas import Event

def extract_feature_from_json(payload: Optional[Dict[str, Any]]) -> Optional[Event]:
    """
    Build an Event from the first feature of a USGS GeoJSON feed.
    Returns None when the feed has no features.
    Raises KeyError/TypeError/ValidationError on a malformed feature.
    """
    if not payload:
        return None

    features = payload.get("features") or []
    if len(features) == 0:
        return None

    properties = features[0]["properties"]
    return Event(
        title=properties["title"],
        num_of_people=properties["felt"],
        perceived_strength=properties["cdi"],
    )

def is_usable_url(url: Optional[str]) -> bool:
    """Only non-blank http(s) URLs are worth a request"""
    if not url or not url.strip():
        return False
    return url.strip().startswith(("http://", "https://"))
