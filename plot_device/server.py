# plot_device/server.py
import uvicorn

from plot_device.config import load_settings
from plot_device.logging_setup import setup_logging


def serve():
    # logging goes up before uvicorn imports plot_device.main and builds the app
    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run("plot_device.main:app", host=settings.host, port=settings.port, log_config=None)
