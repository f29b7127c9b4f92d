"""
Page Fetcher - Resilient retrieval of the audited page and its auxiliary files.

Architecture:
1. Manual redirect chasing (bounded, relative locations resolved)
2. Per-request timeout
3. Browser-like request headers
4. HTTPS → HTTP fallback at the call site (fetch_with_fallback)
5. Short, non-redirecting probes for robots.txt / ads.txt
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

import httpx

from adready.config import FetchConfig
from adready.logger import logger
from adready.services.errors import (
    NetworkError,
    RequestTimeout,
    RetrievalError,
    TooManyRedirects,
    UnreachableHost,
)
from adready.services.ssrf_protection import SSRFProtection


@dataclass(frozen=True)
class RetrievalOutcome:
    """Result of one retrieval (after redirects)."""
    final_url: str
    status_code: int
    headers: Mapping[str, str]
    body: str
    elapsed_ms: int
    redirect_chain: tuple[str, ...] = ()

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of an auxiliary probe: a body, or a classified failure."""
    url: str
    status_code: Optional[int] = None
    body: str = ""
    failure: Optional[str] = None  # 'timeout' | 'network' | 'http_status'
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _is_redirect(response: httpx.Response) -> bool:
    return 300 <= response.status_code < 400 and "location" in response.headers


class PageFetcher:
    """Fetches pages with manual redirects, timeouts and scheme fallback."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.config = config or FetchConfig.from_settings()
        self.transport = transport
        self.clock = clock

    def _headers(self, overrides: Optional[Mapping[str, str]]) -> dict[str, str]:
        headers = self.config.default_headers
        if overrides:
            headers.update(overrides)
        return headers

    async def _request(
        self,
        client: httpx.AsyncClient,
        url: str,
        headers: Mapping[str, str],
        timeout: float,
    ) -> httpx.Response:
        """Issue one GET bounded by ``timeout`` seconds."""
        try:
            return await asyncio.wait_for(client.get(url, headers=headers), timeout=timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(f"Timeout fetching {url}")
            raise RequestTimeout("Request timeout - website took too long to respond") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Fetch error at {url}: {e}")
            raise NetworkError(str(e) or e.__class__.__name__) from e

    async def fetch(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        *,
        timeout: Optional[float] = None,
        follow_redirects: bool = True,
    ) -> RetrievalOutcome:
        """Fetch ``url``, chasing up to ``max_redirects`` redirects by hand.

        Raises:
            RequestTimeout: a single request exceeded its timeout.
            NetworkError: transport failure or a blocked redirect target.
            TooManyRedirects: redirect bound exceeded in strict mode.
        """
        timeout = timeout if timeout is not None else self.config.timeout_seconds
        request_headers = self._headers(headers)
        current_url = url
        redirect_chain: list[str] = []
        started = self.clock()

        async with httpx.AsyncClient(
            follow_redirects=False,
            timeout=timeout,
            transport=self.transport,
        ) as client:
            while True:
                response = await self._request(client, current_url, request_headers, timeout)

                if not follow_redirects or not _is_redirect(response):
                    break

                if len(redirect_chain) >= self.config.max_redirects:
                    if self.config.strict_redirects:
                        raise TooManyRedirects(
                            f"Too many redirects (more than {self.config.max_redirects})"
                        )
                    logger.warning(f"Redirect limit reached at {current_url}, using last response")
                    break

                location = response.headers["location"]
                try:
                    next_url = str(response.url.join(location))
                except httpx.InvalidURL as e:
                    logger.warning(f"Unusable redirect location at {current_url}: {location!r}")
                    raise NetworkError(f"Invalid redirect location: {location}") from e

                if self.config.block_private_hosts:
                    is_safe, reason = SSRFProtection.validate_url(next_url)
                    if not is_safe:
                        raise NetworkError(f"Redirect target blocked: {reason}")

                redirect_chain.append(current_url)
                current_url = next_url
                logger.info(f"Redirecting to: {current_url}")

        elapsed_ms = int((self.clock() - started) * 1000)

        return RetrievalOutcome(
            final_url=str(response.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            elapsed_ms=elapsed_ms,
            redirect_chain=tuple(redirect_chain),
        )

    async def fetch_with_fallback(self, url: str) -> RetrievalOutcome:
        """Fetch the main page, retrying once over plain HTTP.

        Raises:
            UnreachableHost: no attempt produced a 2xx response.
        """
        attempts = [url]
        if url.lower().startswith("https://"):
            attempts.append("http://" + url[len("https://"):])

        failure = "unknown error"
        for index, attempt_url in enumerate(attempts):
            if index:
                logger.info(f"HTTPS failed ({failure}), trying HTTP: {attempt_url}")
            try:
                outcome = await self.fetch(attempt_url)
            except RetrievalError as e:
                failure = str(e)
                continue

            if outcome.is_success:
                return outcome
            failure = f"Server responded with status {outcome.status_code}"

        raise UnreachableHost(
            f"Failed to access website: {failure}. "
            "Please check if the URL is correct and the website is accessible."
        )

    async def probe(self, url: str) -> ProbeResult:
        """Short-timeout GET of an auxiliary file. Never raises."""
        try:
            outcome = await self.fetch(
                url,
                headers={"User-Agent": self.config.probe_user_agent},
                timeout=self.config.probe_timeout_seconds,
                follow_redirects=False,
            )
        except RequestTimeout as e:
            return ProbeResult(url=url, failure="timeout", error=str(e))
        except RetrievalError as e:
            return ProbeResult(url=url, failure="network", error=str(e))

        if not outcome.is_success:
            return ProbeResult(
                url=url,
                status_code=outcome.status_code,
                failure="http_status",
                error=f"HTTP {outcome.status_code}",
            )

        return ProbeResult(url=url, status_code=outcome.status_code, body=outcome.body)
