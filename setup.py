"""
Setup script for the trivia-duel package.

Installs the trivia_duel package (engine, console driver, CLI) from
src/ and the `trivia-duel` console command.
"""

from setuptools import setup, find_packages

setup(
    name="trivia-duel",
    version="1.0.0",
    description="Trivia Duel - a two-player, turn-based trivia match engine",
    author="Trivia Duel Developers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "trivia-duel=trivia_duel.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
)
