from setuptools import setup, find_packages

setup(
    name="connect-four-console",
    version="1.0.0",
    description="Console Connect Four with a one-ply heuristic computer opponent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "connect-four=connect_four.interfaces.cli:main",
        ],
    },
)
