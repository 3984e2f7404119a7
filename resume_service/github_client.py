"""
GitHub REST API client.

Fetches the profile, repository list and profile README for one user.
Profile and repositories are required; the README is best-effort.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from .errors import UpstreamError, UserNotFound
from .readme import decode_readme_content, render_readme_html

logger = logging.getLogger(__name__)

USER_AGENT = "GitHub-to-PDF-App"
REPOS_PER_PAGE = 100


class GitHubClient:
    """Thin async client over the three GitHub endpoints the resume needs."""

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = "https://api.github.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github.v3+json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        path: str,
        username: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f"GitHub request failed for {path}: {e}")
            raise UpstreamError(f"GitHub API request failed: {e}") from e

        if response.status_code == 404:
            raise UserNotFound(username)
        if not response.is_success:
            logger.error(f"GitHub API returned {response.status_code} for {path}")
            raise UpstreamError(f"GitHub API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"GitHub API returned invalid JSON: {e}") from e

    async def fetch_profile(self, username: str) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """
        Fetch a user's profile and public repositories.

        Args:
            username: GitHub login

        Returns:
            (profile JSON, list of repository JSON objects)

        Raises:
            UserNotFound: GitHub returned 404
            UpstreamError: any other failure (non-2xx, rate limit, network)
        """
        user = quote(username, safe="")

        async with self._client() as client:
            user_data = await self._get_json(client, f"/users/{user}", username)
            repos_data = await self._get_json(
                client,
                f"/users/{user}/repos",
                username,
                params={"per_page": REPOS_PER_PAGE},
            )

        if not isinstance(user_data, dict):
            raise UpstreamError("GitHub API returned an unexpected profile payload")
        if not isinstance(repos_data, list):
            raise UpstreamError("GitHub API returned an unexpected repository payload")

        return user_data, repos_data

    async def fetch_readme_html(self, username: str) -> Optional[str]:
        """
        Fetch the profile README ({username}/{username}) as sanitized HTML.

        Best-effort: returns None on any failure and never raises. Genuine
        absence is logged at INFO, transient failures at WARNING.
        """
        user = quote(username, safe="")

        try:
            async with self._client() as client:
                response = await client.get(f"/repos/{user}/{user}/readme")
        except httpx.HTTPError as e:
            logger.warning(f"Profile README fetch failed for {username}: {e}")
            return None

        if response.status_code == 404:
            logger.info(f"No profile README for {username}")
            return None
        if not response.is_success:
            logger.warning(
                f"Profile README fetch for {username} returned {response.status_code}"
            )
            return None

        try:
            content = response.json().get("content")
            if not content:
                logger.info(f"Profile README for {username} has no content")
                return None
            return render_readme_html(decode_readme_content(content))
        except Exception as e:
            logger.warning(f"Could not decode profile README for {username}: {e}")
            return None
