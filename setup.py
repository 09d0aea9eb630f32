"""
facecube: a facelet model of the 3x3x3 cube on JAX
"""

import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="facecube",
    version="0.1.0",
    description="Face-based 3x3x3 cube state and move engine built on JAX",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "jax>=0.4.0",
        "chex>=0.1.0",
        "tabulate>=0.9.0",
        "termcolor>=1.1.0",
        "numpy>=1.24.0",
        "xtructure",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
