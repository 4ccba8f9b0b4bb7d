"""
Backend gateway used by the public routes.

``LocalBackend`` calls the backend handler in-process. ``HttpBackend`` talks
to a backend running behind its own base URL, e.g. a second instance of this
app started with the same collections.
"""

import logging
import random
from typing import Optional

import httpx
from fastapi import HTTPException
from pydantic import ValidationError

from plot_device.config import Settings
from plot_device.data_store import Collections
from plot_device.models import CollectionName, ItemsEnvelope
from plot_device.services import shuffled_envelope

logger = logging.getLogger(__name__)


class BackendGateway:
    async def fetch(self, name: CollectionName) -> ItemsEnvelope:
        raise NotImplementedError

    async def aclose(self) -> None:
        pass


class LocalBackend(BackendGateway):
    def __init__(self, collections: Collections, rng: Optional[random.Random] = None):
        self.collections = collections
        self.rng = rng

    async def fetch(self, name: CollectionName) -> ItemsEnvelope:
        return shuffled_envelope(self.collections[name], self.rng)


class HttpBackend(BackendGateway):
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def fetch(self, name: CollectionName) -> ItemsEnvelope:
        path = f"/backend/{name.value}"
        try:
            r = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.error("backend %s%s unreachable: %s", self.base_url, path, e)
            raise HTTPException(502, f"Backend network error: {e}")
        if r.status_code != 200:
            logger.error("backend %s%s returned HTTP %d", self.base_url, path, r.status_code)
            raise HTTPException(502, f"Backend HTTP {r.status_code}")
        try:
            return ItemsEnvelope.model_validate_json(r.content)
        except ValidationError as e:
            logger.error("backend %s%s returned a malformed envelope: %s", self.base_url, path, e)
            raise HTTPException(502, "Backend returned a malformed envelope")

    async def aclose(self) -> None:
        await self._client.aclose()


def build_backend(settings: Settings, collections: Collections, rng: Optional[random.Random] = None) -> BackendGateway:
    if settings.backend_url:
        logger.info("public routes forward to backend at %s", settings.backend_url)
        return HttpBackend(settings.backend_url, timeout=settings.backend_timeout)
    return LocalBackend(collections, rng)
