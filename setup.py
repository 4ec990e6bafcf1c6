#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="configfile",
    version="0.1.0",
    description="Per-application, per-mode YAML configuration files in ~/.config",
    author="GeNe FRAG",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=5.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "configfile-show=configfile.show_config:main",
        ],
    },
)
