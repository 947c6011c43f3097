# setup.py
from setuptools import setup, find_packages

setup(
    name="iota",
    version="0.1.0",
    description="A minimal s-expression interpreter with closures and a numeric tower",
    packages=find_packages(include=["iota", "iota.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["iota=iota.__main__:main"],
    },
    zip_safe=False,
)
