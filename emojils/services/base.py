"""
Shared plumbing for the remote service clients.

Clients never raise for remote problems. Every call returns either
Success(value) or Failure(error) and the caller decides what to do.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

T = TypeVar("T")


class RemoteServiceError(Exception):
    """A remote call failed: network, HTTP status, or unexpected payload."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
        self.message = message


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: RemoteServiceError


ServiceResult = Success[T] | Failure


class ServiceClient:
    """
    Base class for JSON-over-HTTP clients.

    The HTTP client is obtained through a factory so that all service
    clients share the server's single httpx.AsyncClient.
    """

    service_name = "service"

    def __init__(self, get_client: Callable[[], httpx.AsyncClient]) -> None:
        self._get_client = get_client

    async def _get_json(
        self, url: str, params: dict[str, str] | None = None
    ) -> ServiceResult[Any]:
        """GET url and decode the JSON body."""
        try:
            response = await self._get_client().get(url, params=params)
            response.raise_for_status()
            return Success(response.json())
        except httpx.HTTPStatusError as e:
            return self._failure(f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._failure(f"{type(e).__name__}: {e}")
        except ValueError as e:
            return self._failure(f"invalid JSON: {e}")

    def _failure(self, message: str) -> Failure:
        return Failure(RemoteServiceError(self.service_name, message))
