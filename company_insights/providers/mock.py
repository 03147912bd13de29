"""Mock provider for testing and offline runs."""

import asyncio
from typing import Callable, Optional, Union

from .base import ExtractionProvider, ExtractionRequest, ExtractionResponse

Outcome = Union[dict, ExtractionResponse, Exception, None]


class MockProvider(ExtractionProvider):
    """Provider that returns scripted outcomes instead of calling the network.

    ``responder`` maps each request to an outcome: a dict of extracted data,
    a full ExtractionResponse, an exception to raise, or None for "no data".
    ``delay`` (seconds) is applied before every outcome.
    """

    name = "mock"

    def __init__(
        self,
        responder: Optional[Callable[[ExtractionRequest], Outcome]] = None,
        delay: float = 0.0,
    ):
        self._responder = responder or self._default_responder
        self.delay = delay
        self.requests: list[ExtractionRequest] = []
        self.completed = 0

    async def extract(self, request: ExtractionRequest) -> ExtractionResponse:
        """Return the scripted outcome for this request."""
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        outcome = self._responder(request)
        self.completed += 1

        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, ExtractionResponse):
            return outcome
        return ExtractionResponse(data=outcome)

    @staticmethod
    def _default_responder(request: ExtractionRequest) -> dict:
        """Plausible data keyed off which schema was requested."""
        properties = request.schema_.get("properties", {})
        if "techStack" in properties:
            return {
                "techStack": ["Python", "React"],
                "features": ["Dashboards", "API access"],
                "lastUpdated": "2024-05-01",
            }
        if "twitterHandle" in properties:
            return {
                "twitterHandle": "@example",
                "linkedinUrl": "https://www.linkedin.com/company/example",
            }
        if "directCompetitors" in properties:
            return {
                "directCompetitors": ["Competitor One", "Competitor Two"],
                "marketPosition": "Early challenger",
                "fundingStage": "Seed",
            }
        if "founders" in properties:
            return {
                "founders": [{"name": "Jane Doe", "role": "CEO"}],
                "education": ["Stanford University"],
            }
        return {}
