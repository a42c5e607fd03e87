"""
Setup script for Pathless grid pathfinding tools.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="pathless",
    version="0.1.0",
    description="Weighted A* pathfinding on grids with walls and traffic, with Rerun visualization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Pathless Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rerun-sdk>=0.15.0",
        "numpy>=1.20.0",
        "pillow>=8.0.0",
        "tqdm>=4.60.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pathless-find-path=scripts.navigation.find_path:main",
            "pathless-benchmark=scripts.navigation.benchmark_search:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
