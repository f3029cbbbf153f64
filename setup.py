#!/usr/bin/env python3

from setuptools import setup

setup(
    name="dicephrase",
    version="1.0.0",
    description="Memorable random passphrases from the EFF dice word list",
    python_requires=">=3.8",
    packages=["dicephrase", "dicephrase.backend"],
    package_data={"dicephrase": ["wordlists/*.txt"]},
    install_requires=[
        "pynacl",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "dicephrase = dicephrase.main:main",
        ],
    },
)
