"""Shared plumbing for the data gateway: settings, logging, middleware, envelopes."""

from shared.config import BaseServiceSettings
from shared.logging import get_logger, setup_logging
from shared.middleware import RequestContextMiddleware

__all__ = [
    "BaseServiceSettings",
    "RequestContextMiddleware",
    "get_logger",
    "setup_logging",
]
