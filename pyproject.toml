[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisemaps"
version = "0.1.0"
description = "Noise maps, color gradients, map builders and shaded image rendering for procedural noise"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["noise", "procedural", "terrain", "heightmap", "gradient", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["noisemaps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
