from setuptools import setup, find_packages
import os

setup(
    name="MATRIXtools",
    version="0.1.0",
    author="MATRIXtools contributors",
    description="A toolkit (JIT compiled) for exploring 2x2 and 3x3 linear transformations",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["MATRIXtools", "MATRIXtools.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Education",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
        # JIT compilation
        "numba>=0.56.0",
        # Natural-language front end (OpenAI-compatible endpoints)
        "openai>=1.0.0",
        # Coloured command line output
        "termcolor>=2.0.0",
    ],
    extras_require={
        # Test tooling
        "test": [
            "pytest>=7.0",
        ],
        # Documentation tools
        "docs": [
            "sphinx>=4.0",
            "sphinx-rtd-theme>=1.0",
            "numpydoc>=1.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "matrixtools=MATRIXtools.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
