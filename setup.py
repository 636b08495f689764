"""
Packaging for lspvehicles.

Install for development with:
    pip install -e ".[test]"
"""
from setuptools import find_packages, setup

setup(
    name="lspvehicles",
    version="1.0.0",
    description="The Liskov Substitution Principle shown on a small vehicle hierarchy",
    packages=find_packages(include=["lspvehicles", "lspvehicles.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["lspvehicles=lspvehicles.__main__:main"]},
)
