[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "togos"
version = "0.1.0"
description = "Helpers for small connected devices: command tokenizing and dispatch, line buffering, MQTT connection upkeep, SHT20 and SSD1306 drivers"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "i2c", "mqtt", "sht20", "ssd1306", "oled", "command", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["togos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
