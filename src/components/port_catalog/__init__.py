"""
Port catalog component - Port registry with code uniqueness.
"""

from .component import DUPLICATE_CODE_MESSAGE, PortCatalogService, validate_port_data
from .models import PortCandidate, PortEdit

__all__ = [
    "PortCatalogService",
    "validate_port_data",
    "DUPLICATE_CODE_MESSAGE",
    "PortCandidate",
    "PortEdit",
]
