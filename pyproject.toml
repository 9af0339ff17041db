[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdemo"
version = "0.1.0"
description = "Small teaching implementations of classic data structures and a level-set demo"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "teaching",
    "linked list",
    "binary search tree",
    "red-black tree",
    "level set",
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdemo-levelset = "dsdemo.levelset:main"
dsdemo-point = "dsdemo.point:main"
dsdemo-intcell = "dsdemo.intcell:main"
dsdemo-matrix = "dsdemo.matrix:main"
dsdemo-arraylist = "dsdemo.arraylist:main"
dsdemo-linkedlist = "dsdemo.linkedlist:main"
dsdemo-binarytree = "dsdemo.binarytree:main"
dsdemo-bst = "dsdemo.bst:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdemo"]

[tool.pytest.ini_options]
addopts = "-ra"
