[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terraforge"
version = "0.1.0"
description = "Procedural terrain meshes, noise height functions and Poisson-disc object placement"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "terrain",
    "procedural",
    "mesh",
    "noise",
    "poisson-disc",
    "heightmap",
    "wavefront-obj",
    "quaternion",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terraforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
