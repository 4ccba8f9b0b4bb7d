# plot_device/routers/public.py
from fastapi import APIRouter, Depends

from plot_device.dependencies import get_backend
from plot_device.gateway import BackendGateway
from plot_device.models import CollectionName, HealthOut, ItemsEnvelope, Message

router = APIRouter(tags=["public"])

WELCOME = "Welcome to the plot device."


@router.get("/", response_model=Message)
def welcome():
    return Message(message=WELCOME)


@router.get("/health", response_model=HealthOut, include_in_schema=False)
def health():
    return HealthOut()


@router.get("/lake", response_model=ItemsEnvelope)
async def lake(backend: BackendGateway = Depends(get_backend)):
    return await backend.fetch(CollectionName.lake)


@router.get("/rocks", response_model=ItemsEnvelope)
async def rocks(backend: BackendGateway = Depends(get_backend)):
    return await backend.fetch(CollectionName.rocks)
