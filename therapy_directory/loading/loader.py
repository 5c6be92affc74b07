from typing import Optional

import httpx
from loguru import logger

from therapy_directory.config.settings import settings


class LoaderError(Exception):
    """Custom exception for failures fetching the directory CSV."""

    pass


class HttpStatusLoaderError(LoaderError):
    """Exception raised when the sheet responds with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} fetching {url}")
        self.status_code = status_code
        self.url = url


class DirectoryLoader:
    """Fetches the published spreadsheet as CSV text. One GET, no retries."""

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or str(settings.sheet_csv_url)
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,  # Published sheets redirect to googleusercontent
            headers={"User-Agent": settings.user_agent},
        )

    async def fetch_csv(self) -> str:
        """Fetches the CSV resource and returns its body decoded as text.

        Raises:
            HttpStatusLoaderError: The server answered with a 4xx/5xx status.
            LoaderError: The request never got a response.
        """
        logger.debug(f"Fetching directory CSV from {self.url}")
        try:
            response = await self.client.get(self.url)
            response.raise_for_status()
            text = response.text
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching directory CSV: {e.response.status_code}")
            raise HttpStatusLoaderError(e.response.status_code, self.url) from e
        except httpx.RequestError as e:
            logger.error(f"Request error fetching directory CSV: {e}")
            raise LoaderError(f"Request failed: {e}") from e

        logger.info(f"Fetched directory CSV ({len(text)} characters).")
        return text

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.debug("Closed HTTP client for directory loader")

    async def __aenter__(self) -> "DirectoryLoader":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
