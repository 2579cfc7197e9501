[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsget"
version = "0.1.1"
description = "A small DNS client: build queries, send them over UDP and print the answers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "resolver", "dig", "udp", "rfc1035"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
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
dnsget = "dnsget.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dnsget"]

[tool.pytest.ini_options]
addopts = "-ra"
