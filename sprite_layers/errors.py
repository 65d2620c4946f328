"""Exceptions raised by layer deploy/undeploy misuse."""
from __future__ import annotations


class LayerError(RuntimeError):
    """Base class for layer lifecycle errors."""


class AlreadyAttachedError(LayerError):
    """Raised when a deployed layer is deployed again to a different surface."""


class NotAttachedError(LayerError):
    """Raised when a layer that was never deployed is undeployed."""
