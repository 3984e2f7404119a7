"""
Unit tests for resume template rendering.
"""

from datetime import datetime

from resume_service.renderer import render_resume
from resume_service.view_model import build_view_model


def make_view_model(sample_user, sample_repos, readme_html="<p>Hello <strong>world</strong></p>"):
    return build_view_model(sample_user, sample_repos, readme_html, now=datetime(2026, 10, 16))


class TestRenderResume:

    def test_final_variant_has_no_download_link(self, sample_user, sample_repos):
        html = render_resume(make_view_model(sample_user, sample_repos))

        assert html.startswith("<!DOCTYPE html>")
        assert "Download PDF" not in html
        assert "The Octocat" in html
        assert "Generated on 10/16/2026" in html

    def test_preview_variant_links_to_pdf(self, sample_user, sample_repos):
        html = render_resume(make_view_model(sample_user, sample_repos), show_download_button=True)

        assert "Download PDF" in html
        assert 'href="/pdf?username=octocat"' in html

    def test_lists_repositories_in_order(self, sample_user, sample_repos):
        html = render_resume(make_view_model(sample_user, sample_repos))

        assert html.index("Spoon-Knife") < html.index("hello-world") < html.index("linguist")

    def test_readme_html_is_inserted_verbatim(self, sample_user, sample_repos):
        html = render_resume(make_view_model(sample_user, sample_repos))

        assert "<p>Hello <strong>world</strong></p>" in html

    def test_readme_section_omitted_when_empty(self, sample_user, sample_repos):
        html = render_resume(make_view_model(sample_user, sample_repos, readme_html=None))

        assert 'class="readme"' not in html

    def test_profile_fields_are_escaped(self, sample_user, sample_repos):
        sample_user["bio"] = "<script>alert(1)</script>"

        html = render_resume(make_view_model(sample_user, sample_repos))

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty_optional_fields_are_hidden(self, sample_repos):
        html = render_resume(make_view_model({"login": "minimal"}, sample_repos))

        assert "No bio available" in html
        assert "<li></li>" not in html

    def test_no_repositories(self, sample_user):
        html = render_resume(make_view_model(sample_user, []))

        assert "No public repositories." in html
