import pathlib
from setuptools import setup

HERE = pathlib.Path(__file__).parent

setup(
    name="rsatools",
    version="0.1",
    description="Textbook RSA key generation and encryption built on Miller-Rabin and a binary extended Euclid.",
    long_description=(HERE / "README.rst").read_text(),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    packages=[
        "rsatools",
        "rsatools.RSA",
    ],
    entry_points={
        "console_scripts": ["rsatools=rsatools.__main__:main"],
    },
)
