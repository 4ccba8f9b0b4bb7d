# plot_device/services.py
import logging
import random
from typing import Optional

from plot_device.models import Collection, ItemsEnvelope
from plot_device.shuffle import shuffle

logger = logging.getLogger(__name__)


def shuffled_envelope(collection: Collection, rng: Optional[random.Random] = None) -> ItemsEnvelope:
    # shuffle a copy; the static collection keeps its order
    items = shuffle(list(collection.items), rng)
    logger.debug("shuffled %s (%d items)", collection.name.value, len(items))
    return ItemsEnvelope(items=items)
