"""
Dog CEO API client

This module handles:
1. Fetching the full breed catalog (breed -> sub-breeds)
2. Fetching random dog images, overall or for one breed
3. Validating the {"message": ..., "status": ...} envelope of every response

Any failure (network, HTTP status, bad JSON, unexpected payload) is raised
as DogApiError. There are no retries; callers decide what to do.
"""

import logging
from typing import Dict, List, Optional

import requests

from config import DOG_API_BASE_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class DogApiError(Exception):
    """A remote fetch against the Dog CEO API failed."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} (HTTP {self.status_code}, {self.url})"
        return f"{base} ({self.url})"


def _is_string_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


class DogApiClient:
    """Thin wrapper over requests for the three endpoints the gallery uses."""

    def __init__(
        self,
        base_url: str = DOG_API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_all_breeds(self) -> Dict[str, List[str]]:
        """
        Get the breed catalog mapping: breed name -> list of sub-breed names.

        The API's key order is preserved.
        """
        url = self._url("breeds/list/all")
        message = self._get_message(url)
        if not isinstance(message, dict) or not all(
            isinstance(name, str) and _is_string_list(subs) for name, subs in message.items()
        ):
            raise DogApiError("Malformed breed catalog payload", url)
        return {name: list(subs) for name, subs in message.items()}

    def get_random_images(self, count: int) -> List[str]:
        """Get `count` random image URLs across all breeds."""
        return self._get_images(self._url(f"breeds/image/random/{count}"))

    def get_breed_random_images(
        self, breed: str, count: int, sub_breed: Optional[str] = None
    ) -> List[str]:
        """
        Get up to `count` random image URLs for one breed.

        Args:
            breed: Breed key from the catalog (already URL-path-safe)
            count: Number of images to ask for
            sub_breed: Optional sub-breed of `breed`
        """
        path = f"breed/{breed}/{sub_breed}" if sub_breed else f"breed/{breed}"
        return self._get_images(self._url(f"{path}/images/random/{count}"))

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    def _get_images(self, url: str) -> List[str]:
        message = self._get_message(url)
        if not _is_string_list(message):
            raise DogApiError("Malformed image list payload", url)
        return message

    def _get_message(self, url: str):
        """GET `url` and return the `message` field of a successful response."""
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            raise DogApiError(f"Request failed: {e}", url, status_code) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise DogApiError("Response is not valid JSON", url, resp.status_code) from e

        if not isinstance(payload, dict) or "message" not in payload:
            raise DogApiError("Response is missing the 'message' field", url, resp.status_code)
        if payload.get("status") != "success":
            raise DogApiError(
                f"API reported status {payload.get('status')!r}", url, resp.status_code
            )
        return payload["message"]
