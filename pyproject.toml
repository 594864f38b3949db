[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arboles"
version = "0.1.0"
description = "Tree data structures: general trees, binary search trees, AVL and red-black trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "avl", "red-black", "bst", "binary-tree", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arboles-demo = "arboles.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["arboles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
