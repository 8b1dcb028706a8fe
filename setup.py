from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pynoisefield",
    version="0.0.1",
    description="Procedural 2D gradient noise and dense scalar grids for terrain generation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pynoisefield", "pynoisefield.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "click>=7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
        "gpu": [
            "taichi>=1.4.0",
        ],
    },
    keywords="procedural noise gradient noise perlin terrain grid",
    entry_points={
        "console_scripts": [
            "nf-noisefield=pynoisefield.cli.noise_commands:noisefield",
        ],
    },
)
