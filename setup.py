import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()


with open("ideorder/version.py", "r") as f:
    exec(f.read())

setup(
    name="ideorder",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The ideorder Authors",
    description="Order genome ideograms to minimise crossing links",
    long_description=read_file("README.rst"),
    license="GPLv2",
    classifiers=[
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    keywords="karyotype ideogram links crossing simulated-annealing",

    # Requirements
    install_requires=["numpy>1.6", "sentinel", "pyyaml"],
    extras_require={
        "test": ["pytest", "mock"],
    },

    # Scripts
    entry_points={
        "console_scripts": [
            "ideorder = ideorder.scripts.order_ideograms:main",
        ],
    }
)
