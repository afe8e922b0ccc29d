from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="simpleregistry",
    version="0.1.0",
    description="Typed in-memory object registry with type-filtered and reverse lookup.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
