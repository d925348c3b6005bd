#!/usr/bin/env python3
"""
lr-schedulers - Setup Configuration
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

# Read requirements
requirements = [
    "numpy>=1.21.0",
]

optional_requirements = {
    "dev": [
        "pytest>=7.0.0",
        "pytest-cov>=3.0.0",
        "torch>=1.13.0",
        "black>=22.0.0",
        "isort>=5.10.0",
        "mypy>=0.960",
    ],
}

setup(
    name="lr-schedulers",
    version="1.0.0",
    author="lr-schedulers contributors",
    author_email="",
    description="Learning rate schedules for optimization loops",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require=optional_requirements,
    include_package_data=True,
    zip_safe=False,
)
