[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaikin"
version = "0.1.0"
description = "Interactive visualiser for Chaikin's corner-cutting curve smoothing algorithm"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chaikin", "curve", "smoothing", "subdivision", "animation", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chaikin = "chaikin.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chaikin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
