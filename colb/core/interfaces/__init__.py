"""
Interfaces for the services colb resolves through its container.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = ["ILogger", "IPresenter"]
