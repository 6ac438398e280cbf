# setup.py
from setuptools import setup, find_packages

setup(
    name="qlisp",
    version="0.1.0",
    description="A small embeddable S-/Q-expression language with closures, currying and variadic functions",
    packages=find_packages(include=["qlisp", "qlisp.*"]),
    package_data={"qlisp": ["prelude/*.lsp"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
