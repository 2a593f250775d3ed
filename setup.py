from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="line-formatter",
    version="0.1.0",
    description="Bracketed single-line text rendering for structured log records",
    # Repo convention: package sources live under `backend/`.
    package_dir={"": "backend"},
    packages=find_packages(where="backend", include=["line_formatter", "line_formatter.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10",
        "pyyaml>=6.0",
    ],
    extras_require={
        # Tests are plain unittest; pytest is an optional runner.
        "test": ["pytest>=8.0"],
    },
)
