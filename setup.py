# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fscount",
    version="0.1.0",
    description="Count files and directories below a path, filtered by depth and name globs",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fscount*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fscount=fscount.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
