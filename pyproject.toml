[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "selfplaychess"
version = "0.1.0"
description = "A small chess board with random and neural-network self-play that writes games as move lists"
requires-python = ">=3.10"
keywords = ["chess", "self-play", "neural-network", "board-game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
selfplaychess = "selfplaychess.simulate:main"

[tool.hatch.build.targets.wheel]
packages = ["selfplaychess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
