[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gorillas"
version = "0.1.0"
description = "A two-player artillery game: lob projectiles over city buildings at your opponent"
requires-python = ">=3.10"
keywords = ["game", "artillery", "gorillas", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gorillas = "gorillas.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gorillas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
