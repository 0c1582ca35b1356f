[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circumdraw"
version = "1.0.0"
description = "Place three points on a canvas and draw the circle that passes through all of them."
requires-python = ">=3.10"
dependencies = []
keywords = ["circle", "circumcircle", "geometry", "drawing", "canvas", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circumdraw = "circumdraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["circumdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
