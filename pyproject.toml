[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvkernels"
version = "0.1.0"
description = "Small self-checking integer kernels on 32-bit words: key schedules, hashes, number theory and bit tricks."
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "rv32", "kernels", "self-test", "bit-manipulation", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvkernels = "rvkernels.programs:main"

[tool.hatch.build.targets.wheel]
packages = ["rvkernels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
