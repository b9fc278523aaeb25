[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelworks"
version = "0.1.0"
description = "Small raster toys and a pixel-level OCR pipeline: binarisation, segmentation, a feed-forward network and visual demos."
requires-python = ">=3.10"
keywords = [
    "ocr",
    "otsu",
    "binarisation",
    "segmentation",
    "neural-network",
    "cellular-automaton",
    "fractals",
    "sorting-visualisation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelworks-challenge = "pixelworks.challenge:main"
pixelworks-bounce = "pixelworks.trajectories:main_bounce"
pixelworks-parabola = "pixelworks.trajectories:main_parabola"
pixelworks-sortimage = "pixelworks.sortimage:main"
pixelworks-visualsort = "pixelworks.visualsort:main"
pixelworks-ocr = "pixelworks.ocr:main"
pixelworks-xor = "pixelworks.xor:main"
pixelworks-life = "pixelworks.life:main"
pixelworks-fractals = "pixelworks.fractals:main"
pixelworks-circles = "pixelworks.circles:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelworks"]

[tool.hatch.build.targets.sdist]
include = [
    "pixelworks",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
