"""
HTML to PDF export using Playwright/Chromium.

Two browser lifecycles, selected with BROWSER_MODE:

- per_request: every export launches its own Chromium and closes it when
  the export finishes, successfully or not.
- shared: one Chromium is launched on first use and kept until shutdown;
  every export gets its own browser context, closed after the export.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import RenderError

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]
PDF_FORMAT = "A4"
PDF_MARGIN = {"top": "20px", "right": "20px", "bottom": "20px", "left": "20px"}


class PDFExporter:
    """Rasterizes rendered resume HTML to PDF bytes."""

    def __init__(
        self,
        headless: bool = True,
        timeout_ms: int = 30000,
        browser_mode: str = "per_request",
    ):
        self.headless = headless
        self.timeout_ms = timeout_ms
        self.browser_mode = browser_mode

        self._playwright = None
        self._shared_browser = None
        self._shared_lock = asyncio.Lock()

    async def export(self, html: str) -> bytes:
        """
        Render HTML to an A4 PDF.

        Waits for network idle so remote images (avatar, README badges) are
        loaded, and emulates screen media so the on-screen styling is kept.

        Raises:
            RenderError: browser launch, page load or PDF generation failed
        """
        try:
            async with self._page() as page:
                await page.set_content(html, wait_until="networkidle")
                await page.emulate_media(media="screen")
                pdf_bytes = await page.pdf(
                    format=PDF_FORMAT,
                    print_background=True,
                    margin=PDF_MARGIN,
                )
        except (PlaywrightTimeoutError, asyncio.TimeoutError) as e:
            logger.error("PDF rendering timed out")
            raise RenderError(f"Rendering timed out after {self.timeout_ms}ms") from e
        except Exception as e:
            logger.error(f"PDF rendering failed: {str(e)}")
            raise RenderError(f"Rendering failed: {str(e)}") from e

        return bytes(pdf_bytes)

    @asynccontextmanager
    async def _page(self) -> AsyncIterator:
        if self.browser_mode == "shared":
            async with self._shared_page() as page:
                yield page
        else:
            async with self._dedicated_page() as page:
                yield page

    @asynccontextmanager
    async def _dedicated_page(self) -> AsyncIterator:
        from playwright.async_api import async_playwright

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless, args=LAUNCH_ARGS)
            try:
                page = await browser.new_page()
                page.set_default_timeout(self.timeout_ms)
                yield page
            finally:
                await browser.close()
                logger.debug("Chromium closed")

    @asynccontextmanager
    async def _shared_page(self) -> AsyncIterator:
        browser = await self._get_shared_browser()
        context = await browser.new_context()
        try:
            page = await context.new_page()
            page.set_default_timeout(self.timeout_ms)
            yield page
        finally:
            await context.close()

    async def _get_shared_browser(self):
        async with self._shared_lock:
            if self._shared_browser is not None and self._shared_browser.is_connected():
                return self._shared_browser

            from playwright.async_api import async_playwright

            if self._playwright is None:
                self._playwright = await async_playwright().start()

            logger.info("Launching shared Chromium instance")
            self._shared_browser = await self._playwright.chromium.launch(
                headless=self.headless, args=LAUNCH_ARGS
            )
            return self._shared_browser

    async def close(self) -> None:
        """Shut down the shared browser, if one was started."""
        async with self._shared_lock:
            browser = self._shared_browser
            self._shared_browser = None
            try:
                if browser is not None:
                    await browser.close()
            finally:
                if self._playwright is not None:
                    await self._playwright.stop()
                    self._playwright = None
