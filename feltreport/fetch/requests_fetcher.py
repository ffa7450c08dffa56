import datetime as dt
from typing import Any, Dict, Optional, Tuple
import requests

from feltreport.core.config import settings
from .base import BaseFetcher, FetchResult

class RequestsFetcher(BaseFetcher):
    def fetch(self, url: str, timeout_sec: Tuple[float, float] = (15, 10)) -> FetchResult:
        headers = {"User-Agent": settings.USER_AGENT, "Accept": "application/geo+json, application/json"}
        resp = requests.get(url, headers=headers, timeout=timeout_sec)
        final_url = str(resp.url)
        status = int(resp.status_code)

        text: Optional[str] = None
        payload: Optional[Dict[str, Any]] = None

        if resp.ok and resp.text:
            text = resp.text
            try:
                payload = resp.json()
            except ValueError:
                payload = None

        return FetchResult(
            url=url,
            status_code=status,
            final_url=final_url,
            text=text,
            payload=payload,
            fetched_at=dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        )
