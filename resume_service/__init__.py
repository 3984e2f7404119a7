"""
Resume Service - GitHub profile to PDF resume.

Fetches a public GitHub profile, renders it into an HTML resume and
converts it to PDF using Playwright/Chromium.
"""

__version__ = "0.1.0"
