[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "janeitequiz"
version = "1.0.0"
description = "A ten-question terminal quiz on Pride and Prejudice with Regency-era context notes"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "jane austen", "pride and prejudice", "literature", "education"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
janeitequiz = "janeitequiz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["janeitequiz"]

[tool.pytest.ini_options]
addopts = "-ra"
