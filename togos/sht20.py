"""Reading temperature and humidity from an SHT20 sensor over I2C."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Protocol

_CMD_TEMPERATURE = 0xF3
_CMD_HUMIDITY = 0xF5
_CMD_WRITE_USER_REG = 0xE6
_CMD_READ_USER_REG = 0xE7
_CMD_RESET = 0xFE

_DISABLE_ONCHIP_HEATER = 0b00000000
_ENABLE_OTP_RELOAD = 0b00000000
_DISABLE_OTP_RELOAD = 0b00000010
_RESERVED_BITMASK = 0b00111000

SOFT_RESET_DELAY_MS = 20
TEMPERATURE_DELAY_MS = 100
HUMIDITY_DELAY_MS = 40

INVALID_VALUE = 0xFFFF


def c_to_f(c: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return c * 1.8 + 32


@dataclass(frozen=True)
class Temperature:
    """A temperature in degrees Celsius."""

    celsius: float

    @property
    def fahrenheit(self) -> float:
        return c_to_f(self.celsius)


@dataclass(frozen=True)
class TemperatureReading:
    """A raw 16-bit temperature value as reported by the sensor."""

    value: int = INVALID_VALUE

    @property
    def celsius(self) -> float:
        return self.value * (175.72 / 65536.0) - 46.85

    @property
    def fahrenheit(self) -> float:
        return c_to_f(self.celsius)

    def is_valid(self) -> bool:
        return self.value != INVALID_VALUE


@dataclass(frozen=True)
class HumidityReading:
    """A raw 16-bit relative humidity value as reported by the sensor."""

    value: int = INVALID_VALUE

    @property
    def rh(self) -> float:
        """Relative humidity as a fraction, nominally 0.0 to 1.0."""
        return self.value * (1.25 / 65536.0) - 0.06

    @property
    def rh_percent(self) -> float:
        return self.value * (125.0 / 65536.0) - 6.0

    def is_valid(self) -> bool:
        return self.value != INVALID_VALUE


@dataclass(frozen=True)
class EverythingReading:
    """A temperature reading and a humidity reading taken together."""

    temperature: TemperatureReading = field(default_factory=TemperatureReading)
    humidity: HumidityReading = field(default_factory=HumidityReading)

    @property
    def temperature_c(self) -> float:
        return self.temperature.celsius

    @property
    def temperature_f(self) -> float:
        return self.temperature.fahrenheit

    @property
    def rh(self) -> float:
        """Relative humidity as a fraction, nominally 0.0 to 1.0."""
        return self.humidity.rh

    @property
    def rh_percent(self) -> float:
        return self.humidity.rh_percent

    @property
    def vpd_kpa(self) -> float:
        """Vapour pressure deficit, in kPa."""
        temp_c = self.temperature_c
        es = 0.6108 * math.exp(17.27 * temp_c / (temp_c + 237.3))
        ae = self.rh * es
        return es - ae

    @property
    def dew_point(self) -> Temperature:
        """Dew point; NaN when the humidity is not positive."""
        tem = -1.0 * self.temperature_c
        esdp = 6.112 * math.exp(-1.0 * 17.67 * tem / (243.5 - tem))
        ed = self.rh * esdp
        if ed <= 0:
            return Temperature(math.nan)
        eln = math.log(ed / 6.112)
        return Temperature(-243.5 * eln / (eln - 17.67))

    def is_valid(self) -> bool:
        """False when either value is the sensor's out-of-range marker."""
        return self.temperature.is_valid() and self.humidity.is_valid()


class I2CBus(Protocol):
    """The two-wire bus operations the driver needs."""

    def begin_transmission(self, address: int) -> None: ...

    def write(self, byte: int) -> int: ...

    def end_transmission(self) -> int: ...

    def request_from(self, address: int, quantity: int) -> int: ...

    def read(self) -> int: ...


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class Driver:
    """Talks to an SHT20 on an I2C bus."""

    RESOLUTION_12BITS = 0b00000000
    RESOLUTION_11BITS = 0b10000001
    RESOLUTION_10BITS = 0b10000000
    RESOLUTION_8BITS = 0b00000001

    DEFAULT_ADDRESS = 0x40

    def __init__(self, i2c: I2CBus, delay: Optional[Callable[[int], None]] = None) -> None:
        self._i2c = i2c
        self._delay = delay or _sleep_ms
        self.address = self.DEFAULT_ADDRESS
        self.resolution = self.RESOLUTION_12BITS
        self._onchip_heater = _DISABLE_ONCHIP_HEATER
        self._otp_reload = _DISABLE_OTP_RELOAD

    def _send(self, *data: int) -> None:
        self._i2c.begin_transmission(self.address)
        for byte in data:
            self._i2c.write(byte)
        self._i2c.end_transmission()

    def _receive(self, count: int) -> list[int]:
        self._i2c.request_from(self.address, count)
        return [self._i2c.read() & 0xFF for _ in range(count)]

    def _read_user_register(self) -> int:
        self._send(_CMD_READ_USER_REG)
        (config,) = self._receive(1)
        return config

    def begin(self, address: int = DEFAULT_ADDRESS) -> bool:
        """Use the sensor at ``address``; return whether it answers."""
        self.address = address
        return self.is_connected()

    def reset(self) -> None:
        """Soft-reset the sensor and rewrite its user register."""
        self._send(_CMD_RESET)
        self._delay(SOFT_RESET_DELAY_MS)
        self._onchip_heater = _DISABLE_ONCHIP_HEATER
        self._otp_reload = _DISABLE_OTP_RELOAD
        config = self._read_user_register()
        config = (
            (config & _RESERVED_BITMASK)
            | self.resolution
            | self._onchip_heater
            | self._otp_reload
        )
        self._send(_CMD_WRITE_USER_REG, config)

    def _measure(self, command: int, delay_ms: int) -> int:
        self.reset()
        self._send(command)
        self._delay(delay_ms)
        msb, lsb = self._receive(2)
        return msb << 8 | lsb

    def read_everything(self) -> EverythingReading:
        """Measure temperature, then humidity."""
        temperature = TemperatureReading(self._measure(_CMD_TEMPERATURE, TEMPERATURE_DELAY_MS))
        humidity = HumidityReading(self._measure(_CMD_HUMIDITY, HUMIDITY_DELAY_MS))
        return EverythingReading(temperature, humidity)

    def is_connected(self) -> bool:
        """True unless the user register reads back as 0xFF."""
        return self._read_user_register() != 0xFF