"""
Resume template rendering with Jinja2.
"""

import os
from functools import lru_cache

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import ResumeViewModel

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
RESUME_TEMPLATE = "resume.html"


@lru_cache()
def get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )


def render_resume(view_model: ResumeViewModel, show_download_button: bool = False) -> str:
    """
    Render the resume document.

    Args:
        view_model: Output of build_view_model
        show_download_button: True for the browser preview (adds a PDF link),
            False for the document that gets exported

    Returns:
        Complete HTML document
    """
    template = get_environment().get_template(RESUME_TEMPLATE)
    return template.render(
        user=view_model.user,
        repos=view_model.repos,
        readme_html=view_model.readme_html,
        generated_at=view_model.generated_at,
        show_download_button=show_download_button,
    )
