from setuptools import setup, find_packages

setup(
    name="club-simulator",
    version="0.1.0",
    description="Day replay and table settlement for a pay-per-hour computer club",
    author="adamfilli",
    packages=find_packages(include=["clubsimulator", "clubsimulator.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "club-simulator=clubsimulator.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
