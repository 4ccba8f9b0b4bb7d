# plot_device/dependencies.py
import random
from typing import Optional

from fastapi import Request

from plot_device.data_store import Collections
from plot_device.gateway import BackendGateway


def get_collections(request: Request) -> Collections:
    return request.app.state.collections


def get_rng(request: Request) -> Optional[random.Random]:
    return request.app.state.rng


def get_backend(request: Request) -> BackendGateway:
    return request.app.state.backend
