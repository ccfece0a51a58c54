[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logixcip"
version = "0.1.0"
description = "CIP / EtherNet/IP building blocks for emulating Logix controllers: service and type codes, value decoding, reply headers, forward-open messages, connection bookkeeping and path routing."
requires-python = ">=3.10"
dependencies = []
keywords = ["cip", "ethernet/ip", "eip", "logix", "plc", "industrial", "automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logixcip"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
