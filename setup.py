"""Setup script for the project."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="cosy-efficiency",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="HDD-normalised heat pump efficiency tracking and before/after comparison",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/cosy-efficiency",
    packages=find_packages(include=["cosy_efficiency", "cosy_efficiency.*", "config"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Home Automation",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": [
            "cosy-efficiency=cosy_efficiency.presentation.cli.main:main",
        ],
    },
)
