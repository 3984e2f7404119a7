"""
Resume Service - FastAPI application.

Fetches a GitHub profile, renders it as an HTML resume (/preview) or
converts the resume to PDF using Playwright/Chromium (/pdf).
"""

import logging
import os
import threading
from datetime import datetime, timezone
from io import BytesIO
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import get_settings, validate_config_on_startup
from .errors import UserNotFound
from .github_client import GitHubClient
from .models import HealthResponse, ResumeViewModel
from .pdf_exporter import PDFExporter
from .renderer import render_resume
from .view_model import build_view_model

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

app = FastAPI(
    title="GitHub Resume Service",
    version=__version__,
    description="Turns a public GitHub profile into an HTML/PDF resume"
)


# ============================================================================
# Dependencies
# ============================================================================

def get_github_client() -> GitHubClient:
    """GitHub client configured from settings (token is optional)."""
    settings = get_settings()
    return GitHubClient(
        token=settings.github_token,
        api_url=settings.github_api_url,
        timeout=settings.github_timeout_seconds,
    )


_pdf_exporter: Optional[PDFExporter] = None
_pdf_exporter_lock = threading.Lock()


def get_pdf_exporter() -> PDFExporter:
    """
    Process-wide exporter; only holds a browser when BROWSER_MODE=shared.

    Resolved from FastAPI's threadpool; creation is lock-guarded so only
    one instance (and one shared Chromium) ever exists.
    """
    global _pdf_exporter
    with _pdf_exporter_lock:
        if _pdf_exporter is None:
            settings = get_settings()
            _pdf_exporter = PDFExporter(
                headless=settings.playwright_headless,
                timeout_ms=settings.playwright_timeout,
                browser_mode=settings.browser_mode,
            )
        return _pdf_exporter


# ============================================================================
# Lifecycle
# ============================================================================

@app.on_event("startup")
async def on_startup():
    settings = validate_config_on_startup()
    logger.info(f"GitHub resume service ready on http://{settings.host}:{settings.port}")


@app.on_event("shutdown")
async def on_shutdown():
    if _pdf_exporter is not None:
        await _pdf_exporter.close()


# ============================================================================
# Pipeline
# ============================================================================

async def build_resume(client: GitHubClient, username: str) -> ResumeViewModel:
    """Fetch profile, repositories and README, then build the view model."""
    logger.info(f"Fetching data for GitHub user: {username}")
    user_data, repos_data = await client.fetch_profile(username)
    readme_html = await client.fetch_readme_html(username)
    return build_view_model(user_data, repos_data, readme_html)


def _missing_username() -> PlainTextResponse:
    return PlainTextResponse("Username parameter is required", status_code=400)


def _user_not_found(username: str) -> PlainTextResponse:
    return PlainTextResponse(f'GitHub user "{username}" not found', status_code=404)


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check; does not touch GitHub or Chromium."""
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


@app.get("/preview")
async def preview(
    username: Optional[str] = None,
    client: GitHubClient = Depends(get_github_client),
):
    """
    HTML preview of the resume with a "Download PDF" link.

    Returns:
        200 HTML, 400 without username, 404 for unknown users, 500 otherwise
    """
    if not username or not username.strip():
        return _missing_username()
    username = username.strip()

    try:
        view_model = await build_resume(client, username)
        html = render_resume(view_model, show_download_button=True)
    except UserNotFound:
        logger.info(f"GitHub user not found: {username}")
        return _user_not_found(username)
    except Exception as e:
        logger.error(f"Error generating preview for {username}: {str(e)}")
        return PlainTextResponse(f"Error generating preview: {str(e)}", status_code=500)

    return HTMLResponse(html)


@app.get("/pdf")
async def pdf(
    username: Optional[str] = None,
    client: GitHubClient = Depends(get_github_client),
    exporter: PDFExporter = Depends(get_pdf_exporter),
):
    """
    Generate the resume PDF as a downloadable attachment.

    Returns:
        StreamingResponse with PDF binary data; 400/404/500 as plain text
    """
    if not username or not username.strip():
        return _missing_username()
    username = username.strip()

    try:
        view_model = await build_resume(client, username)

        logger.info(f"Rendering template for {username}")
        html = render_resume(view_model)

        logger.info("Generating PDF with Playwright...")
        pdf_bytes = await exporter.export(html)
    except UserNotFound:
        logger.info(f"GitHub user not found: {username}")
        return _user_not_found(username)
    except Exception as e:
        logger.error(f"Error generating PDF for {username}: {str(e)}")
        return PlainTextResponse(f"Error generating PDF: {str(e)}", status_code=500)

    logger.info(f"PDF generated successfully for {username} ({len(pdf_bytes)} bytes)")

    return StreamingResponse(
        BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{username}-github-resume.pdf"',
            "Content-Length": str(len(pdf_bytes)),
        }
    )


# Static assets (index page) - mounted last so the routes above take precedence
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
