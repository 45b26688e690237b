from __future__ import annotations
import httpx
import logging
from typing import Any, Dict, List, Optional

from fastapi import Request

from .settings import Settings, settings as default_settings


logger = logging.getLogger(__name__)


class OpenAIError(RuntimeError):
	"""Raised when the chat completions call fails or returns something unusable."""

	def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Any = None) -> None:
		super().__init__(message)
		self.status_code = status_code
		self.detail = detail


class OpenAIClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
		config: Optional[Settings] = None,
	) -> None:
		config = config or default_settings
		self.api_key = api_key or config.openai_api_key
		if not self.api_key:
			raise ValueError("OPENAI_API_KEY is not configured")
		self.model = model or config.openai_model
		self.base_url = (base_url or config.openai_base_url).rstrip("/")
		self._client = httpx.AsyncClient(
			timeout=timeout if timeout is not None else config.openai_timeout_seconds,
			transport=transport,
		)

	async def chat(self, messages: List[Dict[str, str]]) -> str:
		"""Send a chat exchange and return the first choice's message content."""
		headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		payload: Dict[str, Any] = {"model": self.model, "messages": messages}
		try:
			r = await self._client.post(f"{self.base_url}/chat/completions", headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			resp = http_err.response
			try:
				detail: Any = resp.json()
			except ValueError:
				detail = resp.text
			raise OpenAIError(
				f"OpenAI returned HTTP {resp.status_code}",
				status_code=resp.status_code,
				detail=detail,
			) from http_err
		except httpx.RequestError as net_err:
			raise OpenAIError(f"OpenAI request failed: {net_err!r}", detail=str(net_err)) from net_err
		try:
			data = r.json()
			content = data["choices"][0]["message"]["content"]
		except (ValueError, KeyError, IndexError, TypeError) as parse_err:
			raise OpenAIError("Unexpected OpenAI response", status_code=r.status_code, detail=r.text) from parse_err
		if not isinstance(content, str):
			raise OpenAIError("Unexpected OpenAI response", status_code=r.status_code, detail=r.text)
		return content

	async def complete(self, system: str, user: str) -> str:
		return await self.chat([
			{"role": "system", "content": system},
			{"role": "user", "content": user},
		])

	async def aclose(self) -> None:
		await self._client.aclose()


def get_openai_client(request: Request) -> Optional[OpenAIClient]:
	# None when OPENAI_API_KEY is unset; callers check after validating the request
	return getattr(request.app.state, "openai_client", None)
