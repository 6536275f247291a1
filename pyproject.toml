[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awesomeascii"
version = "0.0.1a0"
description = "Turn PNG and JPEG images into ASCII art: plain, colored, or traced with Sobel edge detection."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ascii", "ascii-art", "image", "sobel", "edge-detection", "terminal", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Artistic Software",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
awesome-ascii = "awesomeascii.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["awesomeascii"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
