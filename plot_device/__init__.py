"""Plot device: a shuffled image gallery served by FastAPI."""

__version__ = "0.1.0"
