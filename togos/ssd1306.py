"""Driving an SSD1306 OLED display over I2C, and printing text to it."""

from __future__ import annotations

from typing import Protocol

from togos.fonts import Font
from togos.printing import Print

ROW_COUNT = 8
COLUMN_COUNT = 128

COMMAND_MODE = 0x80
DATA_MODE = 0x40
DISPLAY_OFF_CMD = 0xAE
DISPLAY_ON_CMD = 0xAF
NORMAL_DISPLAY_CMD = 0xA6
INVERSE_DISPLAY_CMD = 0xA7
ACTIVATE_SCROLL_CMD = 0x2F
DEACTIVATE_SCROLL_CMD = 0x2E
SET_BRIGHTNESS_CMD = 0x81

DEFAULT_ADDRESS = 0x3C
ALTERNATE_ADDRESS = 0x3D

_INIT_SEQUENCE = (
    0xAE,  # display off
    0xA6,  # normal display
    0xAE,  # display off
    0xD5, 0x80,  # display clock divide ratio
    0xA8, 0x3F,  # multiplex
    0xD3, 0x00,  # display offset: none
    0x40 | 0x00,  # start line
    0x8D, 0x14,  # charge pump
    0x20, 0x00,  # memory mode
    0xA1,  # segment remap: mirror horizontally
    0xC8,  # COM scan direction: rotate vertically
    0xDA, 0x12,  # COM pins
    0x81, 0xCF,  # contrast
    0xD9, 0xF1,  # precharge
    0xDB, 0x40,  # VCOM detect
    0xA4,  # resume from RAM content
    0xA6,  # normal display
    0x2E,  # stop scrolling
    0x20, 0x00,  # horizontal addressing mode
)


class I2CBus(Protocol):
    """The two-wire bus operations the driver needs."""

    def begin_transmission(self, address: int) -> None: ...

    def write(self, byte: int) -> int: ...

    def end_transmission(self) -> int: ...


class Driver:
    """Sends commands and display data to an SSD1306.

    Tracks the write position, assuming horizontal addressing mode.
    """

    DEFAULT_ADDRESS = DEFAULT_ADDRESS
    ALTERNATE_ADDRESS = ALTERNATE_ADDRESS

    def __init__(self, i2c: I2CBus) -> None:
        self._i2c = i2c
        self.address = DEFAULT_ADDRESS
        self.at_row = 0
        self.at_column = 0

    @property
    def row_count(self) -> int:
        return ROW_COUNT

    @property
    def column_count(self) -> int:
        return COLUMN_COUNT

    def _transmit(self, mode: int, byte: int) -> None:
        self._i2c.begin_transmission(self.address)
        self._i2c.write(mode)
        self._i2c.write(byte & 0xFF)
        self._i2c.end_transmission()

    def begin(self, address: int = DEFAULT_ADDRESS) -> None:
        """Use the display at ``address`` and send the initialisation sequence."""
        self.address = address
        for command in _INIT_SEQUENCE:
            self.send_command(command)

    def send_command(self, command: int) -> None:
        self._transmit(COMMAND_MODE, command)

    def send_data(self, data: int) -> None:
        """Send one column byte and advance the tracked position."""
        self._transmit(DATA_MODE, data)
        self.at_column += 1
        if self.at_column == COLUMN_COUNT:
            self.at_column = 0
            self.at_row += 1
            if self.at_row == ROW_COUNT:
                self.at_row = 0

    def display_on(self) -> None:
        self.send_command(DISPLAY_ON_CMD)

    def set_brightness(self, brightness: int) -> None:
        self.send_command(SET_BRIGHTNESS_CMD)
        self.send_command(brightness)

    def goto_row_col(self, row: int, col: int) -> None:
        """Move the write position to page ``row``, column ``col``."""
        self.send_command(0xB0 + row)
        self.send_command(0x00 + (col & 0x0F))
        self.send_command(0x10 + ((col >> 4) & 0x0F))
        self.at_column = col
        self.at_row = row

    def clear(self, data: int = 0x00) -> None:
        """Fill the whole display with ``data``, ending back at the origin."""
        self.goto_row_col(0, 0)
        while True:
            self.send_data(data)
            if self.at_column == 0 and self.at_row == 0:
                break

    def clear_to_end_of_row(self, data: int = 0x00) -> None:
        """Fill from the current position to the start of the next row."""
        while True:
            self.send_data(data)
            if self.at_column == 0:
                break


class Printer(Print):
    """Renders text onto a display using a bitmap font."""

    def __init__(self, driver: Driver, font: Font) -> None:
        self._driver = driver
        self._font = font
        self._xor_pattern = 0

    def goto_row_col(self, row: int, col: int) -> None:
        self._driver.goto_row_col(row, col)

    def set_xor(self, pattern: int) -> None:
        """XOR every glyph column byte with ``pattern`` (0xFF inverts)."""
        self._xor_pattern = pattern & 0xFF

    def clear_to_end_of_row(self) -> None:
        self._driver.clear_to_end_of_row(self._xor_pattern)

    def write(self, byte: int) -> int:
        if byte == ord("\r"):
            return 1
        if byte == ord("\n"):
            self._driver.clear_to_end_of_row()
            return 1
        if byte < 32 or byte > 127:
            byte = ord(" ")
        for column in self._font.glyph(byte):
            self._driver.send_data(self._xor_pattern ^ column)
        return 1

    def available_for_write(self) -> int:
        return 1