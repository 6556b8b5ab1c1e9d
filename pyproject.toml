[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vfox"
version = "0.2.4"
description = "Building blocks for an SDK version manager: shell hooks and escaping, archive unpacking, downloads, version comparison, HTML querying and a terminal picker"
requires-python = ">=3.10"
keywords = ["sdk", "version-manager", "shell", "environment", "toolchain"]
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
    "Topic :: Software Development :: Build Tools",
    "Topic :: System :: Shells",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "tqdm>=4.64",
    "blessed>=1.19",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["vfox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
