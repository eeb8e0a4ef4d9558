"""
client/app/utils/api.py

HTTP client for the tutoring backend (REST/JSON).

Availability lookups try the narrowest endpoint first and fall back to
broader ones:

  /tutor-availability/findByTutorAndDay/{tutor_id}/{DAY}
  /tutor-availability/findByTutor/{tutor_id}
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from client.app.config import settings
from client.app.schemas.availability import WeeklyAvailability
from client.app.schemas.sessions import SessionRequest

logger = logging.getLogger(__name__)


class ApiClient:
    """Async client for the backend REST API."""

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.API_TIMEOUT,
        token: Optional[str] = settings.API_TOKEN,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token

    async def _request(
        self,
        method: str,
        path: str,
        headers: dict = None,
        **kwargs
    ) -> Optional[dict | list]:
        """Base HTTP request. None on any failure or empty body."""
        url = f"{self.base_url}{path}"

        _headers = {"Accept": "application/json"}
        if self.token:
            _headers["Authorization"] = f"Bearer {self.token}"
        if headers:
            _headers.update(headers)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                resp = await client.request(method, url, headers=_headers, **kwargs)

                if resp.status_code == 204:
                    return None

                if resp.status_code >= 400:
                    logger.error(f"API error: {method} {path} -> {resp.status_code}")
                    return None

                return resp.json()

            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"API request failed: {method} {path} -> {e}")
                return None

    # ------------------------------------------------------------------
    # Tutor availability
    # ------------------------------------------------------------------

    async def get_tutor_availability(
        self,
        tutor_id: int,
        day_of_week: Optional[str] = None,
    ) -> Optional[list[WeeklyAvailability]]:
        """
        Weekly availability of a tutor.

        Returns None only if every endpoint failed; [] is a valid answer.
        """
        paths = []
        if day_of_week:
            paths.append(f"/tutor-availability/findByTutorAndDay/{tutor_id}/{day_of_week.upper()}")
        paths.append(f"/tutor-availability/findByTutor/{tutor_id}")

        for path in paths:
            result = await self._request("GET", path)
            if isinstance(result, list):
                return _parse_availability(result)
            if result is not None:
                logger.error(f"Unexpected availability payload from {path}: {type(result).__name__}")
            logger.info(f"Availability endpoint {path} unusable, trying next")

        return None

    # ------------------------------------------------------------------
    # Tutoring sessions
    # ------------------------------------------------------------------

    async def create_session(self, request: SessionRequest) -> Optional[dict]:
        """POST /tutoring-sessions/createSession"""
        result = await self._request(
            "POST",
            "/tutoring-sessions/createSession",
            json=request.to_payload(),
        )
        return result if isinstance(result, dict) else None


def _parse_availability(items: list) -> list[WeeklyAvailability]:
    """Parse JSON records; skip entries that are not availability objects."""
    records = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning(f"Skipping availability entry of type {type(item).__name__}")
            continue
        try:
            records.append(WeeklyAvailability.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping malformed availability entry {item.get('id')}: {e.error_count()} error(s)")
    return records


# Singleton
api = ApiClient()
