"""
Setup script for tutor-insights.

tutor-insights extracts learning signals from the questions students ask
an AI tutor. It serves two roles:

1. Classifier - Category, difficulty and concept tags for each question
2. Insight Aggregator - Most asked concepts with teaching suggestions

The 'tutor-insights' command is the primary entry point; the same
operations are available over HTTP via the FastAPI app.
"""

from setuptools import find_packages, setup

setup(
    name="tutor-insights",
    version="1.0.0",
    description="Question classification and topic insights for AI tutoring chats",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Tutor Insights",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # API
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
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
            "httpx>=0.25.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tutor-insights=tutor_insights.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
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
    keywords="learning education tutoring analytics classification",
)
