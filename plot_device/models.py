# plot_device/models.py
import enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


# ----- Enums -----
class CollectionName(str, enum.Enum):
    rocks = "rocks"
    lake = "lake"


# ----- Static data -----
class ImageRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: str  # display URL


class Collection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: CollectionName
    items: Tuple[ImageRecord, ...]


# ----- Wire shapes -----
class ItemsEnvelope(BaseModel):
    items: List[ImageRecord]


class Message(BaseModel):
    message: str


class HealthOut(BaseModel):
    status: str = "ok"
