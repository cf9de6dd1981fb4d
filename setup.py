"""
setup.py

Packaging metadata and CLI entry point for stockmeta.

Version: 1.0.0. Vision-model metadata generation for stock images with
deterministic parsing, category classification and keyword curation.
"""
from setuptools import setup, find_packages

setup(
    name="stockmeta",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
        "requests",
        "openai",
        "anthropic",
        "google-genai",
        "fastapi",
    ],
    extras_require={
        "api": [
            "uvicorn",
        ],
        "test": [
            "pytest",
            "hypothesis",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "stockmeta=cli:cli",
        ],
    },
    python_requires=">=3.9",
)
