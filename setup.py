# setup.py

from setuptools import setup, find_packages

setup(
    name="greedy_tsp",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Greedy-edge and nearest-neighbour heuristics for the Euclidean TSP",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*", "scripts*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["greedy-tsp=greedy_tsp.cli:main"],
    },
)
