[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kantera"
version = "0.1.0"
description = "Composable procedural renders for frame-based video: timed values, keyframed paths, transforms, compositing and filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "rendering", "compositing", "animation", "keyframes", "bezier", "perlin-noise"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kantera"]

[tool.pytest.ini_options]
addopts = "-ra"
