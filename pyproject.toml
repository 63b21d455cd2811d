[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zxtestkit"
version = "0.16.0"
description = "Test harness helpers for ZX Spectrum emulation: frame buffers, debug ports, assets, fingerprints and asset builds"
requires-python = ">=3.10"
keywords = ["zx-spectrum", "emulator", "testing", "fingerprint", "docker"]
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
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Emulators",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zxtestkit-build-assets = "zxtestkit.build_assets:main"

[tool.hatch.build.targets.wheel]
packages = ["zxtestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
