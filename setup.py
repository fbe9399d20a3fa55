from setuptools import setup, find_namespace_packages

setup(
    name="stepsearch",
    version="0.1.0",
    description="Step-by-step search algorithm visualizer",
    packages=find_namespace_packages(include=["stepsearch", "stepsearch.*"]),
    package_data={"stepsearch.config": ["*.conf"]},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "benchmark": [
            "pandas>=1.5",
            "matplotlib>=3.5",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "stepsearch-visualize=stepsearch.cli:main",
        ],
    },
)
