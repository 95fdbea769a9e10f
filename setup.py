""" ecgraph build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecgraph

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecgraph.name,
    version=ecgraph.__version__,
    license=ecgraph.__license__,
    author=ecgraph.__author__,
    author_email=ecgraph.__author_email__,
    description="Interactive elliptic curve point addition over prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={
        "plot": ["matplotlib>=3.3"],
        "test": ["pytest", "matplotlib>=3.3"],
    },
    entry_points={"console_scripts": ["ecgraph=ecgraph.__main__:main"]},
    keywords="elliptic-curves finite-fields group-law visualization education",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Scientific/Engineering :: Visualization",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
