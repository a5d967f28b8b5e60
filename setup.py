from setuptools import setup, find_packages

from signage_admin import __version__

setup(
    name="signage-admin",
    version=__version__,
    description="Media ingestion console for a digital-signage network",
    author="Your Name",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.7",
        "cryptography>=41.0.0",
        "httpx>=0.25.2",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
        "rich>=13.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "signage-cli=cli.main:cli",
        ],
    },
    python_requires=">=3.10",
)
