# setup.py
from setuptools import setup, find_packages

setup(
    name="lson",
    version="0.1.0",
    description="A minimal homoiconic Lisp whose programs are JSON documents",
    packages=find_packages(include=["lson", "lson.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lson = lson.__main__:main"],
    },
    zip_safe=False,
)
