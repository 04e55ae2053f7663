[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolvlib"
version = "0.1.0"
description = "Small utilities: string helpers, UTF conversions, number parsing, a result type, scope guards, a try-lock, a thread pool and simple IPv4 sockets."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "strings", "utf-8", "utf-16", "thread-pool", "sockets", "scope-guard", "expected"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wolvlib"]

[tool.pytest.ini_options]
addopts = "-ra"
