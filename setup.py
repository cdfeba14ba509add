# setup.py - Pure Python package, no extensions
from setuptools import setup, find_packages

setup(
    name="ringing",
    version="0.1.0",
    description="Place notation parsing and permutation composition for change ringing",
    packages=find_packages(include=["ringing", "ringing.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
