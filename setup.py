"""
DPS Config - Configuration management for the DPS ecosystem
"""
from setuptools import setup, find_packages

setup(
    name="dps-config",
    version="1.0.0",
    description="Configuration container for DPS components",
    author="DPS Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
)
