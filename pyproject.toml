[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "photoalbum"
version = "0.1.0"
description = "Photo album project manager: validate project settings, create project directories and keep them in a project tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["photo", "album", "project", "tree", "wizard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
photoalbum = "photoalbum.app:main"

[tool.hatch.build.targets.wheel]
packages = ["photoalbum"]

[tool.pytest.ini_options]
addopts = "-ra"
