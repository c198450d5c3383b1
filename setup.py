import os

from setuptools import find_packages, setup

setup(
    name="amass",
    version="0.1.0",
    packages=find_packages(include=["amass", "amass.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Amass Contributors",
    description="Accumulating validation: run every check, report every failure",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
