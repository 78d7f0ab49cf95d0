# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lumen",
    version="0.3.0",
    description="An embeddable Lisp runtime with tail calls, macros and persistent vectors",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["lumen", "lumen.*"]),
    package_data={"lumen": ["prelude/*.lsp"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lumen=lumen.cli:main"],
    },
    zip_safe=False,
)
