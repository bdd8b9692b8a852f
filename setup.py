import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()

with open("sa_placer/version.py", "r") as f:
    exec(f.read())

setup(
    name="sa-placer",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The sa_placer Authors",
    description="Typed FPGA placement by parallel greedy local search",
    long_description=read_file("README.rst"),
    license="GPLv2",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    ],
    keywords="fpga placement netlist local-search",

    # Requirements
    install_requires=["numpy", "networkx", "sentinel"],
    extras_require={
        "test": ["pytest", "mock"],
    },

    # Scripts
    entry_points={
        "console_scripts": [
            "sa-place = sa_placer.scripts.sa_place:main",
        ],
    }
)
