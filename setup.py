from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="venueplan",
    version="0.1.0",
    description="Venue capacity and event traffic modeling with a validated venue file reader.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx", "pyyaml"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["venueplan=venueplan.cli:main"]},
)
