"""
setup.py

Packaging metadata and CLI entry point for trigger-lookup.

Version: 1.0.0 - Event lookup step with SQL and in-memory lookup stores,
layered YAML configuration and the run/describe/config commands.
"""
from setuptools import setup, find_packages

setup(
    name="trigger-lookup",
    version="1.0.0",
    packages=find_packages(include=["trigger", "trigger.*", "cli", "cli.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "trigger-lookup=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
