from setuptools import setup, find_packages
import os

# Read version from __init__.py
def get_version():
    """Get version from labprotocol/__init__.py"""
    init_file = os.path.join(os.path.dirname(__file__), "labprotocol", "__init__.py")
    with open(init_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"\'')
    raise RuntimeError("Unable to find version string.")

# Installation Examples:
# - Base package only: pip install labprotocol
# - With test tooling: pip install "labprotocol[dev]"

extras_require = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "coverage>=7.3.2",
    ],
}

setup(
    name="labprotocol",
    version=get_version(),
    description="Assemble lab protocols from catalog operations and export them as paginated PDF documents",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    keywords="laboratory, protocol, pdf, drag-and-drop",
    packages=find_packages(include=["labprotocol", "labprotocol.*"]),
    install_requires=[
        # Configuration, catalog and protocol files
        "PyYAML>=6.0.2",

        # PDF rendering and font metrics
        "reportlab>=4.0.0",
    ],
    extras_require=extras_require,

    # Console script entry points
    entry_points={
        "console_scripts": [
            "labprotocol=labprotocol.__main__:main",
        ],
    },
)
