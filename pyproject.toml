[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practiceapps"
version = "0.1.0"
description = "Small practice applications: a note keeper, a parallel task executor, a Pokémon cache client and a Pokémon HTTP API"
requires-python = ">=3.10"
keywords = ["notes", "cli", "tasks", "threads", "pokemon", "flask", "sqlite", "http-api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Utilities",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
practiceapps-notes = "practiceapps.notes_cli:main"
practiceapps-tasks = "practiceapps.tasks:main"
practiceapps-pokeclient = "practiceapps.pokeclient:main"
practiceapps-pokeapi = "practiceapps.pokeapi:main"

[tool.hatch.build.targets.wheel]
packages = ["practiceapps"]

[tool.pytest.ini_options]
addopts = "-ra"
