# setup.py
from setuptools import find_packages, setup

setup(
    name="typedpaths",
    version="0.1.0",
    description="Typed absolute path and directory values with validate-and-warn checks",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "typedpaths=typedpaths.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
