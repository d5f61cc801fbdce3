[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnuscript"
version = "0.3.1"
description = "Building blocks for composing gnuplot scripts: style specs, layout, data sets and terminal commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnuplot", "plotting", "scientific", "visualization", "script"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gnuscript"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
