[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peernet"
version = "1.0.0"
description = "Small TCP message server, client and peer-to-peer node, with the linked list, queue, tree and dictionary they are built on"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "tcp", "peer-to-peer", "socket", "linked-list", "binary-search-tree"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
peernet = "peernet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["peernet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
