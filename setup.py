import os
from setuptools import setup, find_packages


_version = {}
with open(os.path.join(os.path.dirname(__file__), "parcel", "version.py")) as f:
    exec(f.read(), _version)
__version__ = _version["__version__"]


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="parcel",
    version=__version__,
    python_requires=">=3.9",
    install_requires=[
        "pyhumps>=1.6.1",
        "requests",
        "furl",
        "kubernetes>=29.0.0",
        "urllib3",
        "click>=8.0",
        "rich",
        "pyyaml",
    ],
    extras_require={
        "dev": ["pytest", "pytest-mock", "flake8", "black"],
    },
    entry_points={
        "console_scripts": ["parcel=parcel_cli.main:main"],
    },
    author="Hopsworks AB",
    description="PARCEL: Mount catalog datasets as Kubernetes persistent volumes",
    license="Apache License 2.0",
    keywords="Kubernetes, CSI, PersistentVolume, Dataset, WebDAV, iRODS",
    packages=find_packages(exclude=["tests", "tests.*"]),
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
    ],
)
