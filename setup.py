from setuptools import setup, find_packages

setup(
    name="nanofs",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "nanofs=nanofs.cli:main",
        ],
    },
)
