#!/usr/bin/env python

from setuptools import find_namespace_packages, setup

INSTALL_REQUIRES = [
    "beartype>=0.18",
    "PyYAML>=6",
]

TESTS_REQUIRE = [
    "pytest",
    "pytest-cov",
    "colorlog",
    "flake8",
    "pylint",
    "black",
    "mypy",
    "types-PyYAML",
    "isort",
]

setup(
    name="bracefmt",
    version="1.0.0",
    description="printf with brace placeholders and inline specifiers",
    python_requires=">=3.9",

    packages=find_namespace_packages(include=["bracefmt", "bracefmt.*"]),

    install_requires=INSTALL_REQUIRES,
    tests_require=TESTS_REQUIRE,
    extras_require={
        "tests": TESTS_REQUIRE
    },

    entry_points={
        "console_scripts": [
            "bracefmt=bracefmt.entry:console_main",
        ],
    },

    zip_safe=True
)
