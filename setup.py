# setup.py
from setuptools import setup, find_packages

setup(
    name="bl",
    version="0.1.0",
    description="A minimal interactive evaluator for a small Lisp dialect",
    packages=find_packages(include=["bl", "bl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "loguru>=0.7",
        "prompt_toolkit>=3.0.29",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["bl = bl.__main__:main"],
    },
    zip_safe=False,
)
