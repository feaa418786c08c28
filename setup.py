#!/usr/bin/env python3
from setuptools import find_packages, setup

setup(
    name="stemcell-fips",
    version="0.1.0",
    author="BOSH stemcell maintainers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    license="Apache-2.0",
    description="Compliance checks for FIPS-hardened Ubuntu stemcells",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Security",
        "Topic :: System :: Installation/Setup",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Intended Audience :: System Administrators",
    ],
    python_requires=">=3.9",
    install_requires=open("requirements/requirements.in").read().splitlines(),
    extras_require={
        "dev": open("requirements/dev_requirements.in").read().splitlines(),
        "test": open("requirements/test_requirements.in").read().splitlines(),
    },
    include_package_data=True,
    package_data={"stemcell_fips": ["config/settings.yaml", "config/settings-schema.json", "assets/*.txt"]},
    entry_points={"console_scripts": ["stemcell-fips=stemcell_fips.cli:main"]},
)
