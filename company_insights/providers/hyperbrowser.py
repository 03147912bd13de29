"""Hyperbrowser extract API provider."""

import asyncio
import logging
import time
from typing import Optional

import httpx

from company_insights.config import settings
from .base import (
    ExtractionError,
    ExtractionProvider,
    ExtractionRequest,
    ExtractionResponse,
    ProviderConfigurationError,
)

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = {"completed", "failed"}


class HyperbrowserProvider(ExtractionProvider):
    """Start an extract job and poll it until the provider reports a final state."""

    name = "hyperbrowser"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        poll_interval: Optional[float] = None,
        job_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.hyperbrowser_api_key
        if not self.api_key:
            raise ProviderConfigurationError("HYPERBROWSER_API_KEY not configured")

        self.base_url = (base_url or settings.hyperbrowser_base_url).rstrip("/")
        self.poll_interval = settings.job_poll_interval if poll_interval is None else poll_interval
        self.job_timeout = settings.job_timeout if job_timeout is None else job_timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(
                connect=settings.connect_timeout,
                read=settings.read_timeout,
                write=settings.read_timeout,
                pool=settings.connect_timeout,
            ),
            headers={"x-api-key": self.api_key, "Content-Type": "application/json"},
            transport=transport,
        )

    async def extract(self, request: ExtractionRequest) -> ExtractionResponse:
        """Run one extract job to completion."""
        job_id = await self._start_job(request)
        logger.debug(f"Started extract job {job_id} for {request.target_reference}")

        started = time.monotonic()
        while True:
            job = await self._get_json(f"/extract/{job_id}")
            status = job.get("status")

            if status in TERMINAL_STATUSES:
                if status == "failed":
                    return ExtractionResponse(error=job.get("error") or "Extract job failed")
                return ExtractionResponse(data=job.get("data"), error=job.get("error"))

            if time.monotonic() - started > self.job_timeout:
                raise ExtractionError(f"Extract job {job_id} still {status} after {self.job_timeout}s")

            await asyncio.sleep(self.poll_interval)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _payload(self, request: ExtractionRequest) -> dict:
        payload = {
            "urls": [request.target_reference],
            "prompt": request.instruction,
            "schema": request.schema_,
        }
        if request.wait_budget is not None:
            payload["waitFor"] = request.wait_budget
        if request.max_links is not None:
            payload["maxLinks"] = request.max_links
        return payload

    async def _start_job(self, request: ExtractionRequest) -> str:
        body = await self._send("POST", "/extract", json=self._payload(request))
        job_id = body.get("jobId")
        if not job_id:
            raise ExtractionError(f"Extract job was not started: {body.get('error') or 'no jobId'}")
        return job_id

    async def _get_json(self, path: str) -> dict:
        return await self._send("GET", path)

    async def _send(self, method: str, path: str, **kwargs) -> dict:
        """Perform an API call, converting httpx failures into ExtractionError."""
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException as e:
            raise ExtractionError(f"Timeout calling {path}") from e

        except httpx.HTTPStatusError as e:
            raise ExtractionError(f"HTTP {e.response.status_code} calling {path}") from e

        except httpx.RequestError as e:
            raise ExtractionError(f"Request error calling {path}: {e}") from e

        except ValueError as e:
            raise ExtractionError(f"Invalid JSON from {path}") from e
