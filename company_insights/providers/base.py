"""Abstract base class for structured-extraction providers."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExtractionError(Exception):
    """Raised when a provider call cannot produce a result."""


class ProviderConfigurationError(ExtractionError):
    """Raised when a provider is missing credentials or settings."""


class ExtractionRequest(BaseModel):
    """A single structured-extraction call."""

    target_reference: str = Field(description="URL or search URL to extract from")
    instruction: str = Field(description="Natural-language extraction prompt")
    schema_: dict[str, Any] = Field(alias="schema", description="JSON schema of the desired output")
    wait_budget: Optional[int] = Field(default=None, description="Milliseconds to wait for page load")
    max_links: Optional[int] = Field(default=None, description="Linked pages the provider may follow")

    model_config = ConfigDict(populate_by_name=True)


class ExtractionResponse(BaseModel):
    """Provider outcome: extracted data, or an error description."""

    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.data is not None and not self.error


class ExtractionProvider(ABC):
    """Abstract interface for structured-extraction services."""

    name: str = "base"

    @abstractmethod
    async def extract(self, request: ExtractionRequest) -> ExtractionResponse:
        """
        Extract structured data from the request's target.

        Args:
            request: Target, instruction and output schema

        Returns:
            The provider response. Implementations may also raise
            ExtractionError on transport or job failures.
        """
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
