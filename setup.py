from setuptools import setup, find_packages

setup(
    name="stylish",
    version="0.1.0",
    description="Typed string attributes and substring styling for rich text",
    packages=find_packages(include=["stylish", "stylish.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
