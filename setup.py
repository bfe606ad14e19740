#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pageflow - Setup Configuration
Pagination-aware borders and row layouts on top of ReportLab.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="pageflow",
    version="1.0.0",
    description="Multi-page rectangle borders and row label/text layouts for ReportLab PDFs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="pageflow Team",
    python_requires=">=3.9",
    packages=find_packages(include=["config", "config.*", "pageflow", "pageflow.*"]),
    install_requires=requirements,
    extras_require={
        # Test dependencies
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pypdf>=3.17.0",
        ],

        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pypdf>=3.17.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pageflow-demo=pageflow.demo:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Printing",
        "Topic :: Text Processing :: General",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="pdf reportlab layout pagination border",
)
