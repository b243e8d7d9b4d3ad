# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetgen",
    version="0.1.0",
    description="Generate type-safe Swift accessors for Xcode asset catalog images and colors",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetgen", "assetgen.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'assetgen=assetgen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: MacOS",
        "Operating System :: POSIX",
    ],
)
