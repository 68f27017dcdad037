[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsreply"
version = "0.1.0"
description = "A minimal UDP DNS server that sends a fixed reply, with RFC 1035 header and question parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "udp", "rfc1035", "server", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dnsreply = "dnsreply.server:main"

[tool.hatch.build.targets.wheel]
packages = ["dnsreply"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
