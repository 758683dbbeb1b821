[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostresolve"
version = "0.1.0"
description = "Resolve lists of hostnames to their first IP address, with a bounded FIFO queue and a threading demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "hostname", "lookup", "resolver", "queue", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hostresolve-lookup = "hostresolve.lookup:main"
hostresolve-hello = "hostresolve.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["hostresolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
