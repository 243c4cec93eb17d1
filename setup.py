#!/usr/bin/env python
"""Setup configuration for structured text bidi processing."""

from setuptools import find_packages, setup

setup(
    name="structured-text-bidi",
    version="0.1.0",
    description=(
        "Directional formatting for structured text mixing LTR and RTL scripts"
    ),
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
)
