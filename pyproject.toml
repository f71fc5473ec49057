[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vigenshift"
version = "0.1.0"
description = "File encoder using a Vigenère cipher over shuffled printable-ASCII alphabets with rotating key material"
requires-python = ">=3.10"
dependencies = []
keywords = ["vigenere", "cipher", "ascii", "encryption", "classical-cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
vigenshift = "vigenshift.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vigenshift"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
