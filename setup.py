#!/usr/bin/env python3
"""Setup configuration for pyglyphmeta package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="pyglyphmeta",
    version="0.1.0",
    description="Decode MFEKmetadata glyph reports into glyph/Unicode records and list a font's unique encodings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fonttools>=4.38.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pyglyphmeta=pyglyphmeta.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Fonts",
    ],
)
