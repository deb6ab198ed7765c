[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iirdesign"
version = "0.1.0"
description = "Design of IIR digital filters: Butterworth, Elliptic, Bessel and Legendre cascades, plus custom biquads"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "iir", "filter", "biquad", "butterworth", "elliptic", "bessel", "legendre", "audio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iirdesign"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
