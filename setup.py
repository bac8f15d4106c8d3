#!/usr/bin/env python

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="python-randmap",
    version="1.0.0",
    author="Sir Wabbit",
    author_email="wabbit@wabbit.one",
    description="A map that creates a random handle on insertion to use when retrieving",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["randmap"],
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
