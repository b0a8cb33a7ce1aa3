[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "footballsys"
version = "0.1.0"
description = "A small JSON web service for a football club's users, squad members and training records"
requires-python = ">=3.10"
keywords = ["football", "club", "training", "flask", "sqlite", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
footballsys = "footballsys.app:main"

[tool.hatch.build.targets.wheel]
packages = ["footballsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
