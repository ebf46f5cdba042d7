"""Setup script for sixdegrees."""

from setuptools import find_packages, setup

setup(
    name="sixdegrees",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "kuzu>=0.7.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sixdegrees=sixdegrees.cli:main",
        ],
    },
)
