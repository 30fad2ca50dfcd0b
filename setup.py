"""
Setup script for the dist_lib package.
"""

from setuptools import setup, find_packages

setup(
    name="dist_lib",
    version="0.1.0",
    description="Ordered discrete probability distributions for skewed workload simulation",
    packages=find_packages(include=["dist_lib", "dist_lib.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "python-dotenv>=1.0.0",
        "matplotlib>=3.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
