"""
Build script for jsonml.

Usage:
    python -m build
    pip install -e ".[test]"
"""

from setuptools import find_packages, setup

setup(
    name="jsonml",
    version="0.1.0",
    description="Immutable parser configuration for XML to JSONML conversion",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={
        "test": ["pytest"],
    },
)
