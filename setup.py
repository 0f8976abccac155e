#!/usr/bin/env python
"""Setup configuration for Hijri Regional Mapping."""

from setuptools import find_packages, setup

setup(
    name="hijri-regional-mapping",
    version="0.1.0",
    description="Gregorian/Hijri date conversion with regional sighting adjustments",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "hijri-converter>=2.3.1",
        "python-dateutil>=2.8.2",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "hijri-mapping=hijri_mapping.cli:cli",
        ],
    },
)
