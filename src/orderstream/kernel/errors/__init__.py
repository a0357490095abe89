"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── TransformationError
    │   └── ConfigError      (orderstream.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── DeliveryError
"""

from orderstream.kernel.errors.application import ApplicationError, TransformationError
from orderstream.kernel.errors.base import BaseError
from orderstream.kernel.errors.infrastructure import DeliveryError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeliveryError",
    "InfrastructureError",
    "TransformationError",
]
