"""
Setup script for recallmate-engine.

RecallMate Engine is the scheduling core of a personal spaced-repetition
study tracker. It computes:

1. Retention estimates - how well an item is remembered right now
2. Review dates - first-time and progressive spaced-repetition intervals
3. Habit bookkeeping - streaks, timed sessions, study stats and daily goals

The 'recall-engine' command is a developer CLI over the engine.
"""

from setuptools import find_packages, setup

setup(
    name="recallmate-engine",
    version="1.0.0",
    description="Spaced-repetition scheduling engine for a personal study tracker",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="RecallMate",
    packages=find_packages(include=["recall_engine", "recall_engine.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "recall-engine=recall_engine.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition scheduling streaks education",
)
