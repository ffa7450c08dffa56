from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

@dataclass
class FetchResult:
    url: str
    status_code: int
    final_url: str
    text: Optional[str]
    payload: Optional[Dict[str, Any]]
    fetched_at: str  # ISO 8601

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

class BaseFetcher:
    def fetch(self, url: str, timeout_sec: Tuple[float, float] = (15, 10)) -> FetchResult:
        raise NotImplementedError
