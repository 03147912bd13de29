"""Structured-extraction providers used by deep enrichment."""

from .base import (
    ExtractionError,
    ExtractionProvider,
    ExtractionRequest,
    ExtractionResponse,
    ProviderConfigurationError,
)
from .hyperbrowser import HyperbrowserProvider
from .mock import MockProvider

__all__ = [
    "ExtractionError",
    "ExtractionProvider",
    "ExtractionRequest",
    "ExtractionResponse",
    "ProviderConfigurationError",
    "HyperbrowserProvider",
    "MockProvider",
]
