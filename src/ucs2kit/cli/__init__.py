"""Command line entry points."""
from .main import app

__all__ = ["app"]
