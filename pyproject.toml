[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombies-reloaded"
version = "0.1.0"
description = "A top-down zombie survival shooter: move, aim with the mouse and shoot the horde."
requires-python = ">=3.10"
keywords = ["game", "zombies", "shooter", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombies-reloaded = "zombies_reloaded.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zombies_reloaded"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
