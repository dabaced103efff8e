"""RegistryClient: HTTP client for the PolySkill marketplace.

Usage::

    client = RegistryClient.from_config(cfg.registry)
    page = await client.search("weather", limit=5)
    skill = await client.get_skill("@acme/weather")
    result = await client.publish(loaded_skill, adapter_outputs)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from polyskill.registry.models import RegistrySkill, SearchResponse
from polyskill.skills import SkillDefinition, TranspileResult
from polyskill.utils import get_logger

if TYPE_CHECKING:
    from polyskill.config import RegistryConfig

logger = get_logger(__name__)

USER_AGENT = "PolySkill-CLI"


class RegistryError(Exception):
    """The registry could not be reached or rejected a request."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or []


def _encode_name(name: str) -> str:
    return quote(name, safe="")


def _error_from_response(resp: httpx.Response, prefix: str) -> RegistryError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get("error") or body.get("message") or resp.reason_phrase
    details = body.get("details")
    if not isinstance(details, list):
        details = []
    return RegistryError(
        f"{prefix}: {message}",
        status_code=resp.status_code,
        details=[str(d) for d in details],
    )


class RegistryClient:
    """Talks to the registry's ``/api/skills`` endpoints.

    Args:
        base_url: Registry root URL
        token: Bearer token, required for publishing
        timeout: Request timeout in seconds
        download_timeout: Timeout for the download counter ping
        transport: Optional httpx transport (tests use ``httpx.MockTransport``)
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        download_timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token or None
        self.timeout = timeout
        self.download_timeout = download_timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: "RegistryConfig", **kwargs: Any) -> "RegistryClient":
        """Create a client from a RegistryConfig."""
        return cls(
            base_url=config.base_url,
            token=config.token,
            timeout=config.timeout_seconds,
            download_timeout=config.download_timeout_seconds,
            **kwargs,
        )

    def _client(self, timeout: float | None = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or self.timeout,
            headers={"User-Agent": USER_AGENT},
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise RegistryError("Request timed out - is the registry running?") from e
        except httpx.HTTPError as e:
            raise RegistryError(f"Network error: {e}") from e

    async def search(
        self,
        query: str | None = None,
        *,
        skill_type: str | None = None,
        verified: bool = False,
        author: str | None = None,
        keyword: str | None = None,
        category: str | None = None,
        sort: str | None = None,
        limit: int = 20,
    ) -> SearchResponse:
        """Search published skills.

        Args:
            query: Free text matched against name, description and keywords
            skill_type: prompt, tool, workflow or composite
            verified: Only verified skills
            author: Author name filter
            keyword: Keyword filter
            category: Category filter
            sort: relevance, downloads, name or recent
            limit: Maximum number of results

        Returns:
            SearchResponse with the matching skills and the total count
        """
        params: dict[str, str] = {}
        if query:
            params["q"] = query
        if skill_type:
            params["type"] = skill_type
        if verified:
            params["verified"] = "true"
        if author:
            params["author"] = author
        if keyword:
            params["keyword"] = keyword
        if category:
            params["category"] = category
        if sort:
            params["sort"] = sort
        params["limit"] = str(limit)

        resp = await self._request("GET", "/api/skills", params=params)
        if resp.is_error:
            raise _error_from_response(resp, "Search failed")

        try:
            return SearchResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RegistryError(f"Unexpected search response: {e}") from e

    async def get_skill(self, name: str, version: str | None = None) -> RegistrySkill:
        """Fetch a published skill.

        Args:
            name: Scoped skill name
            version: Exact version, latest when omitted

        Returns:
            The published skill payload

        Raises:
            RegistryError: Not found, HTTP error or network failure
        """
        path = f"/api/skills/{_encode_name(name)}"
        if version:
            path = f"{path}/{version}"

        resp = await self._request("GET", path)
        if resp.status_code == 404:
            raise RegistryError(f"Skill not found: {name}", status_code=404)
        if resp.is_error:
            raise _error_from_response(resp, "Failed to fetch skill")

        try:
            return RegistrySkill.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise RegistryError(f"Unexpected skill payload for {name}: {e}") from e

    async def track_download(self, name: str) -> None:
        """Bump the download counter of a skill.

        Failures are logged and ignored; they must not block an install.
        """
        path = f"/api/skills/{_encode_name(name)}/download"
        try:
            async with self._client(timeout=self.download_timeout) as client:
                resp = await client.post(path)
        except httpx.HTTPError as e:
            logger.debug(f"Download tracking failed for {name}: {e}")
            return
        if resp.is_error:
            logger.debug(f"Download tracking for {name} returned {resp.status_code}")

    async def publish(
        self,
        skill: SkillDefinition,
        adapters: dict[str, TranspileResult],
    ) -> dict[str, Any]:
        """Publish a loaded skill with its adapter outputs.

        Args:
            skill: Loaded skill definition
            adapters: Transpile results keyed by platform

        Returns:
            Registry response (contains the new ``id``)

        Raises:
            RegistryError: Missing token, rejected upload or network failure
        """
        if not self.token:
            raise RegistryError("Not authenticated: set POLYSKILL_TOKEN")

        body = {
            "manifest": skill.manifest.to_dict(),
            "tools": {"tools": [t.to_dict() for t in skill.tools]} if skill.tools else None,
            "instructions": skill.instructions,
            "adapters": {platform: result.to_dict() for platform, result in adapters.items()},
        }

        logger.info(f"Publishing {skill.name}@{skill.version} to {self.base_url}")
        resp = await self._request(
            "POST",
            "/api/skills",
            json=body,
            headers={"Authorization": f"Bearer {self.token}"},
        )
        if resp.is_error:
            raise _error_from_response(resp, "Publish failed")

        try:
            data = resp.json()
        except ValueError as e:
            raise RegistryError(f"Unexpected publish response: {e}") from e
        logger.info(f"Published {skill.name}@{skill.version} id={data.get('id')}")
        return data
