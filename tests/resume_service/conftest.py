"""
Pytest fixtures for resume service tests.

No test talks to GitHub or launches Chromium: the GitHub client and the
PDF exporter are replaced through FastAPI dependency overrides, and the
exporter tests patch Playwright.
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Keep real credentials out of the tests; set before resume_service is imported
os.environ.pop("GITHUB_TOKEN", None)
os.environ.pop("BROWSER_MODE", None)

import pytest
from fastapi.testclient import TestClient


SAMPLE_USER = {
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
    "bio": "GitHub mascot",
    "company": "@github",
    "location": "San Francisco",
    "email": None,
    "blog": "https://github.blog",
    "followers": 4000,
    "following": 9,
    "public_repos": 8,
    "created_at": "2011-01-25T18:44:36Z",
    "html_url": "https://github.com/octocat",
}


def make_repo(name, stars, description="A repository", language="Python"):
    return {
        "name": name,
        "description": description,
        "stargazers_count": stars,
        "forks_count": stars // 2,
        "language": language,
        "html_url": f"https://github.com/octocat/{name}",
    }


@pytest.fixture
def sample_user():
    return dict(SAMPLE_USER)


@pytest.fixture
def sample_repos():
    return [make_repo("hello-world", 2500), make_repo("Spoon-Knife", 12000), make_repo("linguist", 30)]


@pytest.fixture
def github_client(sample_user, sample_repos):
    """Stand-in GitHubClient returning canned data."""
    client = MagicMock()
    client.fetch_profile = AsyncMock(return_value=(sample_user, sample_repos))
    client.fetch_readme_html = AsyncMock(return_value="<p>Hi there</p>")
    return client


@pytest.fixture
def pdf_exporter():
    """Stand-in PDFExporter returning fake PDF bytes."""
    exporter = MagicMock()
    exporter.export = AsyncMock(return_value=b"%PDF-1.4 fake resume pdf")
    exporter.close = AsyncMock()
    return exporter


@pytest.fixture
def client(github_client, pdf_exporter):
    """Test client with GitHub and Playwright replaced."""
    from resume_service.app import app, get_github_client, get_pdf_exporter

    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_pdf_exporter] = lambda: pdf_exporter
    yield TestClient(app)
    # Clean up overrides after tests
    app.dependency_overrides.clear()
