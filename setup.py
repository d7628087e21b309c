"""
Setup script for the jeopardy-board package.

Installs the game engine (question-set validation, rules engine and the
screen controller) from the src/ layout. Presentation layers depend on
this package and drive it through its command surface.
"""

from setuptools import setup, find_packages


setup(
    name="jeopardy-board",
    version="1.0.0",
    description="Jeopardy! Board - rules engine and question-set validator for host-run trivia games",
    author="Jeopardy Board Developers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4",
            "build",
            "wheel",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
