import asyncio

import httpx

from plot_device.gallery import GalleryState, load_gallery, render_gallery
from plot_device.models import CollectionName, ImageRecord


def load(transport, state):
    async def run():
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            return await load_gallery(http, state)
    return asyncio.run(run())


def test_state_starts_empty():
    state = GalleryState()
    assert state.names == (CollectionName.rocks, CollectionName.lake)
    assert state.items(CollectionName.rocks) == ()


def test_update_notifies_subscribers():
    state = GalleryState()
    events = []
    unsubscribe = state.subscribe(lambda name, items: events.append((name, items)))
    state.update(CollectionName.lake, [ImageRecord(src="x")])
    unsubscribe()
    state.update(CollectionName.lake, [])
    assert events == [(CollectionName.lake, (ImageRecord(src="x"),))]


def test_load_gallery_fills_both_slices(app):
    state = GalleryState()
    events = []
    state.subscribe(lambda name, items: events.append(name))
    load(httpx.ASGITransport(app=app), state)
    assert sorted(r.src for r in state.items(CollectionName.rocks)) == ["a", "b", "c"]
    assert sorted(r.src for r in state.items(CollectionName.lake)) == ["w", "x", "y", "z"]
    assert sorted(e.value for e in events) == ["lake", "rocks"]


def test_failed_request_leaves_slice_unchanged():
    def handler(request):
        if request.url.path == "/lake":
            return httpx.Response(500)
        return httpx.Response(200, json={"items": [{"src": "r1"}]})

    state = GalleryState()
    state.update(CollectionName.lake, [ImageRecord(src="old")])
    load(httpx.MockTransport(handler), state)
    assert state.items(CollectionName.rocks) == (ImageRecord(src="r1"),)
    assert state.items(CollectionName.lake) == (ImageRecord(src="old"),)


def test_render_gallery():
    state = GalleryState()
    state.update(CollectionName.rocks, [ImageRecord(src="a.png"), ImageRecord(src='b".png')])
    out = render_gallery(state)
    assert out == (
        '<div class="image-wrap">'
        '<div class="rocks"><img src="a.png"><img src="b&quot;.png"></div>'
        '<div class="lake"></div>'
        '</div>'
    )
