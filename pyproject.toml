[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polybench"
version = "0.2.0"
description = "The PolyBench suite of numerical kernels, with a timing harness for each"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "polybench",
    "linear-algebra",
    "stencil",
    "numerical-kernels",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polybench = "polybench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polybench"]

[tool.pytest.ini_options]
addopts = "-ra"
