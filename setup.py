#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="imporder",
    version="0.1.0",
    packages=["imporder"],
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "imporder = imporder.cli:main",
        ],
    },
    author="",
    description="Command-line tool to check grouping and ordering of Go imports",
    license="MIT",
)
