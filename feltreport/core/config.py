import os

DEFAULT_USGS_REQUEST_URL = (
    "https://earthquake.usgs.gov/fdsnws/event/1/query"
    "?format=geojson&starttime=2016-01-01&endtime=2016-05-02&minfelt=50&minmagnitude=5"
)

class Settings:
    # Feed
    USGS_REQUEST_URL: str = os.getenv("USGS_REQUEST_URL", DEFAULT_USGS_REQUEST_URL)

    # HTTP
    CONNECT_TIMEOUT: float = float(os.getenv("CONNECT_TIMEOUT", "15"))
    READ_TIMEOUT: float = float(os.getenv("READ_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("USER_AGENT", "feltreport/1.0")

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Screen
    NOTICE_DURATION_SECONDS: float = float(os.getenv("NOTICE_DURATION_SECONDS", "2.0"))
    LOCALE: str = os.getenv("LOCALE", "en")
    SCREEN_WAIT_TIMEOUT: float = float(os.getenv("SCREEN_WAIT_TIMEOUT", "30"))

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

settings = Settings()
