"""
Setup script for github-resume-service.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="github-resume-service",
    version="0.1.0",
    packages=find_packages(include=["resume_service", "resume_service.*"]),
    package_data={"resume_service": ["templates/*.html", "static/*"]},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "httpx>=0.27",
        "playwright>=1.40",
        "jinja2>=3.1",
        "markdown>=3.5",
        "beautifulsoup4>=4.12",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "github-resume-service=resume_service.__main__:main",
        ],
    },
)
