# plot_device/data_store.py
from types import MappingProxyType
from typing import Iterable, Mapping

from plot_device.models import Collection, CollectionName, ImageRecord

Collections = Mapping[CollectionName, Collection]

_PICSUM = "https://picsum.photos/id/{}/400/300"

ROCKS_IDS = (1016, 1018, 1036, 1043, 1044, 1048, 1050, 1067)
LAKE_IDS = (1011, 1015, 1039, 1051, 1069, 1080, 128, 167)


def make_collection(name: CollectionName, sources: Iterable[str]) -> Collection:
    return Collection(name=name, items=tuple(ImageRecord(src=s) for s in sources))


def load_collections() -> Collections:
    """Build the static collections once; the mapping and its contents are read-only."""
    return MappingProxyType({
        CollectionName.rocks: make_collection(CollectionName.rocks, (_PICSUM.format(i) for i in ROCKS_IDS)),
        CollectionName.lake: make_collection(CollectionName.lake, (_PICSUM.format(i) for i in LAKE_IDS)),
    })
