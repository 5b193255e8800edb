# setup.py
from setuptools import setup, find_packages

setup(
    name="lispi",
    version="0.1.0",
    description="A small homoiconic Lisp interpreter with a recur trampoline",
    packages=find_packages(include=["lispi", "lispi.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispi=lispi.__main__:main"],
    },
    zip_safe=False,
)
