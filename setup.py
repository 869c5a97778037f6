"""Setup script for nwdist package."""

from setuptools import setup, find_packages

setup(
    name="nwdist",
    version="0.1.0",
    description="Needleman-Wunsch edit distance between genetic sequences",
    packages=find_packages(include=["nwdist", "nwdist.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "numpy": [
            "numpy>=1.20.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nwdist=nwdist.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
