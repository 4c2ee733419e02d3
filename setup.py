"""Setup script for the relay controller client configuration package."""
from setuptools import setup, find_namespace_packages

setup(
    name="gpo-relay-config",
    version="1.0.0",
    description="Validated configuration for GPIO/relay controller polling clients",
    author="Craftsman Developer",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["main"],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=6.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gpo-config=main:main",
        ],
    },
)
