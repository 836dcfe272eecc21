[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsigconv"
version = "0.1.0"
description = "Convert ECDSA signatures on 256-bit curves between DER (ASN.1) encoding and raw 64-byte R||S form."
requires-python = ">=3.10"
dependencies = []
keywords = ["ecdsa", "signature", "der", "asn1", "pkcs11", "p-256"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ecsigconv"]

[tool.pytest.ini_options]
addopts = "-ra"
