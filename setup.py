#!/usr/bin/env python

from setuptools import setup

setup(
    name="drivepath",
    version="0.1.0",
    description="Resolve filesystem style paths on Google Drive",
    author="Wouter van Atteveldt",
    author_email="wouter@vanatteveldt.com",
    packages=["drivepath", "drivepath.drive", "drivepath.paths"],
    include_package_data=True,
    zip_safe=False,
    keywords=["Google Drive", "path"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: System :: Filesystems",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
        "class-doc",
        "typing-extensions",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
            'responses',
            'pre-commit',
        ]
    },
    entry_points={
        'console_scripts': [
            'drivepath = drivepath.__main__:main'
        ]
    },
)
