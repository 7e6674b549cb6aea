from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from journal.core.config import settings


ENTRY_ID_HEADER = "X-Entry-Id"


class TransportError(Exception):
    """The request never produced an HTTP response (connection, timeout, ...)."""


@dataclass
class Ack:
    status_code: int
    reason: str = ""
    # Id assigned by the server on insert, when it reports one
    entry_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class Transport(Protocol):
    async def get(self, path: str, params: dict[str, str]) -> Ack: ...


class HttpTransport:
    """Issues the journal's GET requests against a running server with httpx."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    @classmethod
    def from_settings(cls) -> "HttpTransport":
        return cls(settings.client_base_url, timeout=settings.client_timeout)

    async def get(self, path: str, params: dict[str, str]) -> Ack:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {path} failed: {exc}") from exc

        raw_id = response.headers.get(ENTRY_ID_HEADER)
        return Ack(
            status_code=response.status_code,
            reason=response.reason_phrase,
            entry_id=int(raw_id) if raw_id and raw_id.isdigit() else None,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
