# plot_device/routers/backend.py
import random
from typing import Optional

from fastapi import APIRouter, Depends

from plot_device.data_store import Collections
from plot_device.dependencies import get_collections, get_rng
from plot_device.models import CollectionName, ItemsEnvelope
from plot_device.services import shuffled_envelope

router = APIRouter(prefix="/backend", tags=["backend"])


@router.get("/{name}", response_model=ItemsEnvelope)
def get_shuffled(
    name: CollectionName,
    collections: Collections = Depends(get_collections),
    rng: Optional[random.Random] = Depends(get_rng),
):
    """Shuffled copy of a static collection."""
    return shuffled_envelope(collections[name], rng)
