"""
Request-scoped records for the resume pipeline.

Nothing here is persisted; every model lives for one HTTP request.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class Profile(BaseModel):
    """Public GitHub profile, with placeholders for absent optional fields."""
    login: str
    name: str
    avatar: str = ""
    bio: str = "No bio available"
    company: str = ""
    location: str = ""
    email: str = ""
    blog: str = ""
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    created_at: str = "Unknown"
    profile_url: str = ""


class RepositorySummary(BaseModel):
    """One repository row in the resume."""
    name: str
    description: str = "No description"
    stars: int = 0
    forks: int = 0
    language: str = "N/A"
    url: str = ""


class ResumeViewModel(BaseModel):
    """Everything the resume template consumes."""
    user: Profile
    repos: List[RepositorySummary] = Field(default_factory=list)
    readme_html: str = ""
    generated_at: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    timestamp: datetime
