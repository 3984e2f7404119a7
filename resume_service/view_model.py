"""
View-model builder.

Turns raw GitHub JSON (profile + repositories) and the sanitized README
fragment into the flat record rendered by the resume template. Pure: no I/O.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .models import Profile, RepositorySummary, ResumeViewModel

TOP_REPOS_LIMIT = 10

NO_BIO = "No bio available"
NO_DESCRIPTION = "No description"
NO_LANGUAGE = "N/A"
UNKNOWN_DATE = "Unknown"


def format_date(value: datetime) -> str:
    """
    Format a date as M/D/YYYY (no zero padding).

    Example:
        >>> format_date(datetime(2011, 1, 25))
        "1/25/2011"
    """
    return f"{value.month}/{value.day}/{value.year}"


def to_utc(value: datetime) -> datetime:
    """Convert to UTC; naive datetimes are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_github_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 GitHub timestamp ("2011-01-25T18:44:36Z")."""
    if not value:
        return None
    try:
        return to_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except (TypeError, ValueError):
        return None


def build_profile(user_data: Dict[str, Any]) -> Profile:
    """Build a Profile from a /users/{username} response."""
    login = user_data.get("login") or ""
    created = parse_github_timestamp(user_data.get("created_at"))

    return Profile(
        login=login,
        name=user_data.get("name") or login,
        avatar=user_data.get("avatar_url") or "",
        bio=user_data.get("bio") or NO_BIO,
        company=user_data.get("company") or "",
        location=user_data.get("location") or "",
        email=user_data.get("email") or "",
        blog=user_data.get("blog") or "",
        followers=user_data.get("followers") or 0,
        following=user_data.get("following") or 0,
        public_repos=user_data.get("public_repos") or 0,
        created_at=format_date(created) if created else UNKNOWN_DATE,
        profile_url=user_data.get("html_url") or "",
    )


def select_top_repositories(
    repos_data: List[Dict[str, Any]],
    limit: int = TOP_REPOS_LIMIT
) -> List[RepositorySummary]:
    """
    Pick the most-starred repositories.

    Sorted by star count descending. sorted() is stable, so ties keep the
    order GitHub returned them in.
    """
    ranked = sorted(
        repos_data,
        key=lambda repo: repo.get("stargazers_count") or 0,
        reverse=True,
    )

    return [
        RepositorySummary(
            name=repo.get("name") or "",
            description=repo.get("description") or NO_DESCRIPTION,
            stars=repo.get("stargazers_count") or 0,
            forks=repo.get("forks_count") or 0,
            language=repo.get("language") or NO_LANGUAGE,
            url=repo.get("html_url") or "",
        )
        for repo in ranked[:limit]
    ]


def build_view_model(
    user_data: Dict[str, Any],
    repos_data: List[Dict[str, Any]],
    readme_html: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ResumeViewModel:
    """
    Build the template-ready view model.

    Args:
        user_data: Raw /users/{username} JSON
        repos_data: Raw /users/{username}/repos JSON
        readme_html: Sanitized profile README HTML, or None when unavailable
        now: Generation time (defaults to the current time). Both dates
            are rendered as UTC calendar dates.

    Returns:
        ResumeViewModel with at most TOP_REPOS_LIMIT repositories
    """
    generated = to_utc(now) if now else datetime.now(timezone.utc)

    return ResumeViewModel(
        user=build_profile(user_data),
        repos=select_top_repositories(repos_data),
        readme_html=readme_html or "",
        generated_at=format_date(generated),
    )
