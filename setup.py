#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="rlayout",
    version="0.1.0",
    description="Carousel and uniform grid layout generators for the River compositor",
    license="ISC",
    packages=find_packages(include=["rlayout", "rlayout.*"]),
    python_requires=">=3.8",
    install_requires=["PyPubSub>=4.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["rlayout=rlayout.cli:main"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
