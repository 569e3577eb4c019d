# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.0.1",
    description="Evaluation core of a small Lisp with Q-expressions and curried closures",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.__main__:main"],
    },
    zip_safe=False,
)
