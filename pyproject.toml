[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetlayout"
version = "0.1.0"
description = "Technical drawing sheet layouts: ISO 5457 frames, ISO 7200 title blocks and DIN 824 folding marks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "technical drawing",
    "drawing sheet",
    "title block",
    "ISO 5457",
    "ISO 7200",
    "DIN 824",
    "CAD",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sheetlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
