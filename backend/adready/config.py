"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import Dict, List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


DEFAULT_CORS_ORIGINS = [
    "https://adranalyzer.blogspot.com",
    "https://www.adranalyzer.blogspot.com",
    "https://adranalyzer.onrender.com",
    "https://ingsha09.github.io/Adranalyzer",
    "https://ingsha09.github.io/Adranalyzer/",
    "https://ingsha09.github.io",
    "https://ingsha09.github.io/",
    "http://localhost:8080",
    "http://127.0.0.1:5500",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

DEFAULT_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "AdReady Analyzer")
    VERSION: str = "1.0.0"

    # HTTP client settings
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30"))
    PROBE_TIMEOUT: float = float(os.getenv("PROBE_TIMEOUT", "8"))
    HTTP_MAX_REDIRECTS: int = int(os.getenv("HTTP_MAX_REDIRECTS", "5"))
    # false restores best-effort handling: the response after the last
    # followed redirect is returned whatever its status
    HTTP_STRICT_REDIRECTS: bool = _env_bool("HTTP_STRICT_REDIRECTS", "true")
    BROWSER_USER_AGENT: str = os.getenv("BROWSER_USER_AGENT", DEFAULT_BROWSER_USER_AGENT)
    PROBE_USER_AGENT: str = os.getenv("PROBE_USER_AGENT", "AdReady-Analyzer-Bot/1.0")

    # Destination guard
    SSRF_PROTECTION_ENABLED: bool = _env_bool("SSRF_PROTECTION_ENABLED", "true")

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    CORS_ORIGIN_REGEX: str = os.getenv("CORS_ORIGIN_REGEX", r"https?://.*\.(replit\.dev|repl\.co)")

    # Server
    HEALTH_MESSAGE: str = os.getenv("HEALTH_MESSAGE", "Hello from the AdReady backend! I'm alive!\n")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

settings = Settings()


@dataclass(frozen=True)
class FetchConfig:
    """Retrieval configuration handed to the fetcher and the runner."""
    timeout_seconds: float = 30.0
    probe_timeout_seconds: float = 8.0
    max_redirects: int = 5
    strict_redirects: bool = True
    user_agent: str = DEFAULT_BROWSER_USER_AGENT
    probe_user_agent: str = "AdReady-Analyzer-Bot/1.0"
    block_private_hosts: bool = True

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "FetchConfig":
        return cls(
            timeout_seconds=source.HTTP_TIMEOUT,
            probe_timeout_seconds=source.PROBE_TIMEOUT,
            max_redirects=source.HTTP_MAX_REDIRECTS,
            strict_redirects=source.HTTP_STRICT_REDIRECTS,
            user_agent=source.BROWSER_USER_AGENT,
            probe_user_agent=source.PROBE_USER_AGENT,
            block_private_hosts=source.SSRF_PROTECTION_ENABLED,
        )

    @property
    def default_headers(self) -> Dict[str, str]:
        """Browser-like headers sent with every request."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "Accept-Encoding": "gzip, deflate",
            "DNT": "1",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
        }
