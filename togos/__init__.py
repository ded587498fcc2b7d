"""Helpers for small devices: command parsing and dispatch, line buffering, MQTT upkeep, SHT20 and SSD1306 drivers."""

__version__ = "0.1.0"