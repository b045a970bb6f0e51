# app/services/api_client.py
import logging
from typing import Any, NamedTuple

import httpx

from app.core.config import settings
from app.core.exceptions import TeminatError
from app.services.rate_table import RateTable

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiError(TeminatError):
	"""Non-2xx answer from the record store, shown to the user as is."""
	
	def __init__(self, status: int, message: str):
		self.status = status
		self.message = message
		super().__init__(f"HTTP {status}: {message}")


class Snapshot(NamedTuple):
	"""Everything one grid session works on; replaced as a whole by the next load."""
	projects: tuple
	banks: tuple
	currencies: tuple
	rates: tuple
	letters: tuple
	credits: tuple
	
	def rate_table(self) -> RateTable:
		return RateTable.from_rows(self.rates)


def _error_message(response: httpx.Response) -> str:
	try:
		data = response.json()
	except ValueError:
		return response.text or response.reason_phrase
	if isinstance(data, dict):
		message = data.get("message") or data.get("detail")
		if message:
			return message if isinstance(message, str) else str(message)
	return response.reason_phrase


def raise_if_not_ok(response: httpx.Response) -> None:
	if response.is_success:
		return
	raise ApiError(response.status_code, _error_message(response))


class RecordStoreClient:
	"""Async client for the record store API. Failed calls are not retried."""
	
	def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None,
	             timeout: float | None = None):
		self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
		self.transport = transport
		self.timeout = timeout or settings.API_TIMEOUT
	
	def _client(self) -> httpx.AsyncClient:
		return httpx.AsyncClient(base_url=self.base_url, transport=self.transport, timeout=self.timeout)
	
	async def request(self, method: str, url: str, data: Any = None) -> httpx.Response:
		logger.debug("API Request: %s %s%s", method, self.base_url, url)
		async with self._client() as client:
			try:
				response = await client.request(method, url, json=data)
			except httpx.HTTPError as exc:
				logger.error("API Request Error: %s %s%s: %s", method, self.base_url, url, exc)
				raise
		logger.debug("API Response Status: %s", response.status_code)
		if not response.is_success:
			logger.error("API Request Error: %s %s%s: HTTP %s", method, self.base_url, url,
			             response.status_code)
		raise_if_not_ok(response)
		return response
	
	async def get_json(self, path: str) -> Any:
		response = await self.request("GET", f"{API_PREFIX}{path}")
		return response.json()
	
	async def load_snapshot(self) -> Snapshot:
		projects = await self.get_json("/projects")
		banks = await self.get_json("/banks")
		currencies = await self.get_json("/currencies")
		rates = await self.get_json("/exchange-rates")
		letters = await self.get_json("/guarantee-letters")
		credits = await self.get_json("/credits")
		logger.info("Snapshot loaded: %d letters, %d credits, %d rates",
		            len(letters), len(credits), len(rates))
		return Snapshot(
			projects=tuple(projects),
			banks=tuple(banks),
			currencies=tuple(currencies),
			rates=tuple(rates),
			letters=tuple(letters),
			credits=tuple(credits),
		)
