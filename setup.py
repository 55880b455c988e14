# setup.py
from setuptools import setup, find_packages

setup(
    name="humble",
    version="0.1.0",
    description="A minimal interpreter for a Scheme-like expression language",
    packages=find_packages(include=["humble", "humble.*"]),
    package_data={"humble": ["prelude/*.scm"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["humble=humble.repl:main"],
    },
    zip_safe=False,
)
