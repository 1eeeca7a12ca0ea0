#!/usr/bin/env python3
"""
Setup script for cfg-adguard-dns package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="cfg-adguard-dns",
    version="1.0.0",
    author="cfg-adguard-dns contributors",
    author_email="team@example.com",
    description="Toggle AdGuard DNS on resolvconf based hosts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/cfg-adguard-dns",
    packages=find_packages(exclude=["features", "features.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Systems Administration",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["behave"],
    },
    entry_points={
        "console_scripts": [
            "cfg-adguard-dns=cfg_adguard_dns.cli.main:main",
        ],
    },
)
