[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bootdesk"
version = "0.1.0"
description = "C-style sprintf, rand and strcmp helpers and a 16-colour palette desktop renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["sprintf", "rand", "strcmp", "framebuffer", "palette", "bitmap-font", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bootdesk = "bootdesk.graphics:main"

[tool.hatch.build.targets.wheel]
packages = ["bootdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
