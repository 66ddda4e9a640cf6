from setuptools import setup, find_packages

setup(
    name="mendel",
    version="0.1.0",
    description="Estimate selection probabilities by Monte Carlo simulation",
    author="mendel Authors",
    packages=find_packages(exclude=["tests", "testing"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
