# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="A tree-walking evaluator for a small Scheme-like language",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemer = schemer.repl:main"],
    },
    zip_safe=False,
)
