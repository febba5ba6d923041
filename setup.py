# setup.py
from setuptools import setup, find_packages

setup(
    name="sxeval",
    version="0.3.0",
    description="A minimal S-expression evaluator with def, if and quote",
    packages=find_packages(include=["sxeval", "sxeval.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sxeval=sxeval.__main__:main"],
    },
    zip_safe=False,
)
