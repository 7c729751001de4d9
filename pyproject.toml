[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "mightyui"
version = "0.1.0"
description = "Layout helpers, a slider model, a text-editing engine and texture-atlas geometry for building UI widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "layout", "widgets", "textedit", "undo", "slider", "texture-atlas"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["mightyui*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
