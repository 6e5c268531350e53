[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "envsetup"
version = "0.1.0"
description = "Interactively fill in a .env file from a .env.example template"
requires-python = ">=3.10"
keywords = ["dotenv", "env", "configuration", "setup", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
envsetup = "envsetup.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["envsetup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
