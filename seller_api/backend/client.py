import asyncio
import logging
import aiohttp
from seller_api.config import settings

logger = logging.getLogger(__name__)


class BackendError(Exception):
    # status is None when the backend could not be reached
    def __init__(self, status: int | None, message: str):
        self.status = status
        self.message = message
        super().__init__(f"Backend error {status}: {message}")


class BackendClient:
    def __init__(self, base_url=None, token=None, timeout=None):
        # Use provided params or fall back to settings
        self.base_url = (base_url or settings.BACKEND_API_URL).rstrip("/")
        self.token = token if token is not None else settings.BACKEND_API_TOKEN
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.BACKEND_TIMEOUT_SECONDS)

    def _url(self, endpoint: str) -> str:
        # endpoint examples: "shop/product", "shop/product/abc123"
        if endpoint.startswith("/"):
            endpoint = endpoint[1:]
        return f"{self.base_url}/{endpoint}"

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _read(self, method: str, resp: aiohttp.ClientResponse):
        self.last_response = resp  # Store the response
        if resp.status >= 400:
            text = await resp.text()
            logger.error(f"Backend {method} Error {resp.status}: {text}")
            raise BackendError(resp.status, text)
        try:
            # empty body decodes to None
            return await resp.json(content_type=None)
        except ValueError as e:
            logger.error(f"Backend {method} returned invalid JSON (status {resp.status}): {e}")
            raise BackendError(resp.status, f"Invalid JSON response: {e}") from e

    async def _request(self, method: str, endpoint: str, **kwargs):
        url = self._url(endpoint)
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.request(method, url, headers=self._headers(), **kwargs) as resp:
                    return await self._read(method, resp)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"Backend {method} {endpoint} failed: {message}")
            raise BackendError(None, message) from e

    async def get(self, endpoint: str, params: dict | None = None) -> dict:
        return await self._request("GET", endpoint, params=params)

    async def post_json(self, endpoint: str, payload: dict) -> dict:
        return await self._request("POST", endpoint, json=payload)

    async def post_form(self, endpoint: str, form: aiohttp.FormData) -> dict:
        return await self._request("POST", endpoint, data=form)
