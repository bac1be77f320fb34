#!/usr/bin/env python3
"""
Setup script for sketchsvg - converts CAD reconstruction sketches into SVG drawings.
"""

import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (
    (HERE / "README.md").read_text(encoding="utf-8")
    if (HERE / "README.md").exists()
    else "Convert CAD reconstruction sketches into SVG drawings."
)

setup(
    name="sketchsvg",
    version="0.1.0",
    description="Convert CAD reconstruction sketches into SVG drawings",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["sketchsvg", "sketchsvg.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "numpy>=1.20.0",
        # Drawing previews
        "matplotlib>=3.5.0",
        # Progress bars
        "tqdm>=4.60.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Computer Aided Design (CAD)",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
    keywords="cad, sketch, svg, fusion360, geometry",
    include_package_data=True,
    zip_safe=False,
    entry_points={
        "console_scripts": [
            "sketchsvg=sketchsvg.convert:main",
        ],
    },
)
