# togos

Helpers for small connected devices, in plain Python with no third-party
dependencies.

## What is inside

- `togos.parsing`
  - `tokenize(read_from, index0=0)` splits an argument string into words.
    A `{braced group}` stays one word without its outer braces, and groups
    may nest. A `#` between words starts a comment.
  - `TokenizedCommand.parse(line)` turns a line into a frozen
    `TokenizedCommand` with `path`, `arg_str` and `args` (a tuple of
    strings). A blank line or a comment line gives an empty command, for
    which `is_empty()` is true.
  - A malformed line raises `ParseError`, a `ValueError`. It carries a
    `code` (a `ParseErrorCode`) and an `offset` into the line.
- `togos.tlibuffer`: `TLIBuffer(buffer_size=1024)` collects characters
  until it reads `"\n"` or `"\r"`. `on_char(c)` returns a `BufferState`
  (`READING`, `READY` or `OVERFLOWED`). `contents()` gives the current line
  and `reset()` clears it. It holds at most `buffer_size - 1` characters.
- `togos.dispatch`
  - `CommandResult` pairs a `CommandResultCode` with a string value. It is
    built with `ok`, `failed`, `shrug` and `caller_error`.
  - `CommandDispatcher(handlers)` calls each handler in turn with
    `(cmd, source)` and returns the first result whose code is not `SHRUG`.
    If every handler shrugs, it returns a `SHRUG` result with the value
    `"Unrecognized command: <path>"`.
- `togos.mqtt`
  - `MQTTMaintainer` drives any object that follows the `PubSubClient`
    protocol. Once a server is set with `set_server`, `update()` tries to
    reconnect when the client is disconnected. It waits more than 5000 ms
    between attempts, timed by an optional `clock` callable that returns
    milliseconds. When the client is connected, `update()` calls its
    `loop()`.
  - `make_standard` sets up a last-will message `"disconnected"` on
    `<topic>/status` and publishes a retained `online` there after each
    connect.
  - `MQTTCommandHandler` answers these commands: `mqtt/connected`,
    `mqtt/client-id [id]`, `mqtt/connect server port [username password]`,
    `mqtt/disconnect` and `mqtt/publish topic value`.
- `togos.printing`
  - `Print` is an abstract byte sink. `print(thing)` writes bytes as they
    are, floats with two decimals, booleans as `1`/`0`, objects with a
    `print_to(p)` method through that method, and anything else as
    `str(thing)`. `sink << thing` does the same and returns the sink.
  - `BufferPrint(buffer_size)` writes into a fixed-size buffer, with
    `getvalue()`, `size()`, `clear()` and `c_str()`.
- `togos.sht20`
  - `TemperatureReading`, `HumidityReading` and `EverythingReading` decode
    the sensor's raw 16-bit values. `EverythingReading` also gives
    `vpd_kpa` (vapour-pressure deficit) and `dew_point` (NaN when humidity
    is not positive). The raw value `0xFFFF` marks a reading as invalid.
  - `Driver(i2c, delay=None)` reads the sensor over an I2C bus object.
- `togos.fonts`: `Font` holds column-oriented bitmap glyphs for ASCII 32
  to 126. `FONT_5X7` and `FONT_8X8` are included.
- `togos.ssd1306`: `Driver(i2c)` initialises an SSD1306 OLED display, sends
  commands and data to it, and tracks the cursor position. `Printer(driver,
  font)` is a `Print` that draws text with a `Font`; `set_xor(0xFF)` draws
  it inverted.
- `togos.futz`: `get_combined_value()` returns `get_base_value()` (3) plus
  `get_futz_value()` (7).

## Examples

```python
from togos.parsing import TokenizedCommand
from togos.dispatch import CommandDispatcher, CommandResult, CommandSource

def echo(cmd, source):
    if cmd.path == "echo":
        return CommandResult.ok(" ".join(cmd.args))
    return CommandResult.shrug()

dispatch = CommandDispatcher([echo])
cmd = TokenizedCommand.parse("echo hello {big world}")
result = dispatch(cmd, CommandSource.CEREAL)
print(result.code, result.value)   # CommandResultCode.HANDLED hello big world
```

```python
from togos.printing import BufferPrint

out = BufferPrint(32)
out << "t=" << 21.5 << " ok"
print(out.getvalue())   # b't=21.50 ok'
```

## What it does not do

The package has no MQTT network client and no I2C bus implementation.
`MQTTMaintainer`, the SHT20 `Driver` and the SSD1306 `Driver` work with
objects you supply that have the methods described by the `PubSubClient`
and `I2CBus` protocols in their modules. The package also has no
command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```