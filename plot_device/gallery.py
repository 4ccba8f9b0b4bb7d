"""
Python model of the gallery front end.

Mirrors ``client/gallery.js``: an explicit state container with one slice per
collection, a loader that requests every collection concurrently through the
public API, and an HTML renderer with one row of images per collection.
"""

import asyncio
import html
import logging
from typing import Callable, Dict, Iterable, List, Tuple

import httpx

from plot_device.models import CollectionName, ImageRecord, ItemsEnvelope

logger = logging.getLogger(__name__)

Listener = Callable[[CollectionName, Tuple[ImageRecord, ...]], None]


class GalleryState:
    def __init__(self, names: Iterable[CollectionName] = tuple(CollectionName)):
        self._slices: Dict[CollectionName, Tuple[ImageRecord, ...]] = {n: () for n in names}
        self._listeners: List[Listener] = []

    @property
    def names(self) -> Tuple[CollectionName, ...]:
        return tuple(self._slices)

    def items(self, name: CollectionName) -> Tuple[ImageRecord, ...]:
        return self._slices[name]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def update(self, name: CollectionName, items: Iterable[ImageRecord]) -> None:
        self._slices[name] = tuple(items)
        for listener in list(self._listeners):
            listener(name, self._slices[name])


async def _load_one(http: httpx.AsyncClient, state: GalleryState, name: CollectionName) -> None:
    r = await http.get(f"/{name.value}")
    r.raise_for_status()
    state.update(name, ItemsEnvelope.model_validate_json(r.content).items)


async def load_gallery(http: httpx.AsyncClient, state: GalleryState) -> GalleryState:
    """
    Request every collection in ``state`` concurrently.

    A failed request is logged and leaves its slice unchanged; the other
    requests still complete.
    """
    names = state.names
    results = await asyncio.gather(
        *(_load_one(http, state, name) for name in names),
        return_exceptions=True,
    )
    for name, result in zip(names, results):
        if isinstance(result, Exception):
            logger.warning("loading %s failed: %s", name.value, result)
    return state


def render_gallery(state: GalleryState) -> str:
    rows = []
    for name in state.names:
        imgs = "".join(f'<img src="{html.escape(r.src)}">' for r in state.items(name))
        rows.append(f'<div class="{name.value}">{imgs}</div>')
    return f'<div class="image-wrap">{"".join(rows)}</div>'
