"""
OpenSocial REST client: URL building, service tables and a thin HTTP client
"""

__version__ = "1.0.0"

from .services import REGISTRY, ServiceTemplateRegistry
from .url import MalformedUrlError, UrlBuilder

__all__ = [
    "REGISTRY",
    "MalformedUrlError",
    "ServiceTemplateRegistry",
    "UrlBuilder",
]
