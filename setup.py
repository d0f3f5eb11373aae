# setup.py
from setuptools import setup, find_packages

setup(
    name="rum",
    version="0.1.0",
    description="A small Lisp-family language: state-machine lexer, Pratt parser, tree-walking evaluator",
    packages=find_packages(include=["rum", "rum.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.86"],
    },
    zip_safe=False,
)
