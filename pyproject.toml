[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycub"
version = "0.1.0"
description = "A textured grid raycaster with a headless pixel-buffer window context and XPM42 texture loading"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["raycasting", "raycaster", "game", "xpm42", "dda"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raycub = "raycub.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raycub"]

[tool.pytest.ini_options]
addopts = "-ra"
