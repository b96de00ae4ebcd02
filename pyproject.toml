[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyberlite"
version = "0.1.0"
description = "A small educational lattice-based public-key encryption and key encapsulation scheme"
requires-python = ">=3.10"
dependencies = []
keywords = ["lattice", "kyber", "ml-kem", "kem", "post-quantum", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kyberlite = "kyberlite.cli:main"
kyberlite-benchmark = "kyberlite.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["kyberlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
