[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sobelfilter"
version = "0.1.0"
description = "Sobel edge detection with a hand-written convolution pipeline, a threaded variant and a benchmark mode"
requires-python = ">=3.10"
keywords = ["sobel", "edge detection", "convolution", "gaussian blur", "image processing"]
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
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sobelfilter = "sobelfilter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sobelfilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
