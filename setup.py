# setup.py
from setuptools import setup, find_packages

setup(
    name="schemelet",
    version="0.1.0",
    description="A tree-walking evaluator for a small Scheme dialect",
    packages=find_packages(include=["schemelet", "schemelet.*"]),
    package_data={"schemelet": ["prelude/*.scm"]},
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemelet = schemelet.repl:main"],
    },
    zip_safe=False,
)
