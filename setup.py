#!/usr/bin/env python
# encoding: utf-8
from setuptools import setup
import io

setup(
    name="labelconverter",
    python_requires=">3.6.0",
    version="1.0.0",
    package_dir={"labelconverter": "labelconverter"},
    packages=[
        "labelconverter",
        "labelconverter.utilities",
        "labelconverter.data_classes",
    ],
    install_requires=[
        "typing_extensions",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description=(
        "Converts phoneme labels between lab files and Praat textgrids, "
        "with an ordered phoneme rewrite table."
    ),
    long_description=io.open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
)
