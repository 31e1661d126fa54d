[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warmupkit"
version = "1.0.0"
description = "Dynamic arrays, sparse polynomials, raw images and debugging helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = ["dynamic array", "polynomial", "image", "sparse matrix", "debugging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
warmupkit = "warmupkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warmupkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
