# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="golp",
    version="0.1.0",
    description="A minimal Lisp reader and tree-walking evaluator",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["golp", "golp.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["golp=golp.repl:main"],
    },
    zip_safe=False,
)
