"""Setup configuration for hue-discovery."""

from setuptools import setup, find_packages

setup(
    name="hue-discovery",
    version="0.1.0",
    description="SSDP discovery of Philips Hue bridges on the local network",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hue-discovery=hue_discovery.cli:main",
        ],
    },
)
