"""Bitmap fonts for column-oriented displays, covering ASCII 32 to 126."""

from __future__ import annotations

from dataclasses import dataclass

FIRST_CODE = 32
_HEADER_SIZE = 2


@dataclass(frozen=True)
class Font:
    """Font data: a width byte, a height byte, then one column byte per pixel column.

    Glyphs are stored consecutively, starting at ASCII 32.
    """

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) < _HEADER_SIZE or self.data[0] == 0:
            raise ValueError("font data needs a non-zero width and a height")
        if (len(self.data) - _HEADER_SIZE) % self.data[0]:
            raise ValueError("font data length is not a whole number of glyphs")

    @property
    def width(self) -> int:
        return self.data[0]

    @property
    def height(self) -> int:
        return self.data[1]

    def __len__(self) -> int:
        """Number of glyphs in the font."""
        return (len(self.data) - _HEADER_SIZE) // self.width

    def glyph(self, code: int) -> bytes:
        """Column bytes for character ``code``; codes without a glyph render as a space."""
        index = code - FIRST_CODE
        if not 0 <= index < len(self):
            index = 0
        start = _HEADER_SIZE + index * self.width
        return self.data[start : start + self.width]


FONT_5X7 = Font(
    bytes.fromhex(
        "05 07"
        "00 00 00 00 00"  # space
        "00 00 5F 00 00"  # !
        "00 03 00 03 00"  # "
        "14 3E 14 3E 14"  # #
        "24 2A 7F 2A 12"  # $
        "43 33 08 66 61"  # %
        "36 49 55 22 50"  # &
        "00 05 03 00 00"  # '
        "00 1C 22 41 00"  # (
        "00 41 22 1C 00"  # )
        "14 08 3E 08 14"  # *
        "08 08 3E 08 08"  # +
        "00 50 30 00 00"  # ,
        "08 08 08 08 08"  # -
        "00 60 60 00 00"  # .
        "20 10 08 04 02"  # /
        "3E 51 49 45 3E"  # 0
        "00 04 02 7F 00"  # 1
        "42 61 51 49 46"  # 2
        "22 41 49 49 36"  # 3
        "18 14 12 7F 10"  # 4
        "27 45 45 45 39"  # 5
        "3E 49 49 49 32"  # 6
        "01 01 71 09 07"  # 7
        "36 49 49 49 36"  # 8
        "26 49 49 49 3E"  # 9
        "00 36 36 00 00"  # :
        "00 56 36 00 00"  # ;
        "08 14 22 41 00"  # <
        "14 14 14 14 14"  # =
        "00 41 22 14 08"  # >
        "02 01 51 09 06"  # ?
        "3E 41 59 55 5E"  # @
        "7E 09 09 09 7E"  # A
        "7F 49 49 49 36"  # B
        "3E 41 41 41 22"  # C
        "7F 41 41 41 3E"  # D
        "7F 49 49 49 41"  # E
        "7F 09 09 09 01"  # F
        "3E 41 41 49 3A"  # G
        "7F 08 08 08 7F"  # H
        "00 41 7F 41 00"  # I
        "30 40 40 40 3F"  # J
        "7F 08 14 22 41"  # K
        "7F 40 40 40 40"  # L
        "7F 02 0C 02 7F"  # M
        "7F 02 04 08 7F"  # N
        "3E 41 41 41 3E"  # O
        "7F 09 09 09 06"  # P
        "1E 21 21 21 5E"  # Q
        "7F 09 09 09 76"  # R
        "26 49 49 49 32"  # S
        "01 01 7F 01 01"  # T
        "3F 40 40 40 3F"  # U
        "1F 20 40 20 1F"  # V
        "7F 20 10 20 7F"  # W
        "41 22 1C 22 41"  # X
        "07 08 70 08 07"  # Y
        "61 51 49 45 43"  # Z
        "00 7F 41 00 00"  # [
        "02 04 08 10 20"  # backslash
        "00 00 41 7F 00"  # ]
        "04 02 01 02 04"  # ^
        "40 40 40 40 40"  # _
        "00 01 02 04 00"  # `
        "20 54 54 54 78"  # a
        "7F 44 44 44 38"  # b
        "38 44 44 44 44"  # c
        "38 44 44 44 7F"  # d
        "38 54 54 54 18"  # e
        "04 04 7E 05 05"  # f
        "08 54 54 54 3C"  # g
        "7F 08 04 04 78"  # h
        "00 44 7D 40 00"  # i
        "20 40 44 3D 00"  # j
        "7F 10 28 44 00"  # k
        "00 41 7F 40 00"  # l
        "7C 04 78 04 78"  # m
        "7C 08 04 04 78"  # n
        "38 44 44 44 38"  # o
        "7C 14 14 14 08"  # p
        "08 14 14 14 7C"  # q
        "00 7C 08 04 04"  # r
        "48 54 54 54 20"  # s
        "04 04 3F 44 44"  # t
        "3C 40 40 20 7C"  # u
        "1C 20 40 20 1C"  # v
        "3C 40 30 40 3C"  # w
        "44 28 10 28 44"  # x
        "0C 50 50 50 3C"  # y
        "44 64 54 4C 44"  # z
        "00 08 36 41 41"  # {
        "00 00 7F 00 00"  # |
        "41 41 36 08 00"  # }
        "02 01 02 04 02"  # ~
    )
)

FONT_8X8 = Font(
    bytes.fromhex(
        "08 08"
        "00 00 00 00 00 00 00 00"  # space
        "00 00 00 00 5F 00 00 00"  # !
        "00 00 00 03 00 03 00 00"  # "
        "00 24 7E 24 24 7E 24 00"  # #
        "00 2E 2A 7F 2A 3A 00 00"  # $
        "00 46 26 10 08 64 62 00"  # %
        "00 20 54 4A 54 20 50 00"  # &
        "00 00 00 04 02 00 00 00"  # '
        "00 00 00 3C 42 00 00 00"  # (
        "00 00 00 42 3C 00 00 00"  # )
        "00 10 54 38 54 10 00 00"  # *
        "00 10 10 7C 10 10 00 00"  # +
        "00 00 00 80 60 00 00 00"  # ,
        "00 10 10 10 10 10 00 00"  # -
        "00 00 00 60 60 00 00 00"  # .
        "00 40 20 10 08 04 00 00"  # /
        "3C 62 52 4A 46 3C 00 00"  # 0
        "44 42 7E 40 40 00 00 00"  # 1
        "64 52 52 52 52 4C 00 00"  # 2
        "24 42 42 4A 4A 34 00 00"  # 3
        "30 28 24 7E 20 20 00 00"  # 4
        "2E 4A 4A 4A 4A 32 00 00"  # 5
        "3C 4A 4A 4A 4A 30 00 00"  # 6
        "02 02 62 12 0A 06 00 00"  # 7
        "34 4A 4A 4A 4A 34 00 00"  # 8
        "0C 52 52 52 52 3C 00 00"  # 9
        "00 00 00 48 00 00 00 00"  # :
        "00 00 80 64 00 00 00 00"  # ;
        "00 00 10 28 44 00 00 00"  # <
        "00 28 28 28 28 28 00 00"  # =
        "00 00 44 28 10 00 00 00"  # >
        "00 04 02 02 52 0A 04 00"  # ?
        "00 3C 42 5A 56 5A 1C 00"  # @
        "7C 12 12 12 12 7C 00 00"  # A
        "7E 4A 4A 4A 4A 34 00 00"  # B
        "3C 42 42 42 42 24 00 00"  # C
        "7E 42 42 42 24 18 00 00"  # D
        "7E 4A 4A 4A 4A 42 00 00"  # E
        "7E 0A 0A 0A 0A 02 00 00"  # F
        "3C 42 42 52 52 34 00 00"  # G
        "7E 08 08 08 08 7E 00 00"  # H
        "00 42 42 7E 42 42 00 00"  # I
        "30 40 40 40 40 3E 00 00"  # J
        "7E 08 08 14 22 40 00 00"  # K
        "7E 40 40 40 40 40 00 00"  # L
        "7E 04 08 08 04 7E 00 00"  # M
        "7E 04 08 10 20 7E 00 00"  # N
        "3C 42 42 42 42 3C 00 00"  # O
        "7E 12 12 12 12 0C 00 00"  # P
        "3C 42 52 62 42 3C 00 00"  # Q
        "7E 12 12 12 32 4C 00 00"  # R
        "24 4A 4A 4A 4A 30 00 00"  # S
        "02 02 02 7E 02 02 02 00"  # T
        "3E 40 40 40 40 3E 00 00"  # U
        "1E 20 40 40 20 1E 00 00"  # V
        "3E 40 20 20 40 3E 00 00"  # W
        "42 24 18 18 24 42 00 00"  # X
        "02 04 08 70 08 04 02 00"  # Y
        "42 62 52 4A 46 42 00 00"  # Z
        "00 00 7E 42 42 00 00 00"  # [
        "00 04 08 10 20 40 00 00"  # backslash
        "00 00 42 42 7E 00 00 00"  # ]
        "00 08 04 7E 04 08 00 00"  # ^
        "80 80 80 80 80 80 80 00"  # _
        "3C 42 99 A5 A5 81 42 3C"  # `
        "00 20 54 54 54 78 00 00"  # a
        "00 7E 48 48 48 30 00 00"  # b
        "00 00 38 44 44 44 00 00"  # c
        "00 30 48 48 48 7E 00 00"  # d
        "00 38 54 54 54 48 00 00"  # e
        "00 00 00 7C 0A 02 00 00"  # f
        "00 18 A4 A4 A4 A4 7C 00"  # g
        "00 7E 08 08 08 70 00 00"  # h
        "00 00 00 48 7A 40 00 00"  # i
        "00 00 40 80 80 7A 00 00"  # j
        "00 7E 18 24 40 00 00 00"  # k
        "00 00 00 3E 40 40 00 00"  # l
        "00 7C 04 78 04 78 00 00"  # m
        "00 7C 04 04 04 78 00 00"  # n
        "00 38 44 44 44 38 00 00"  # o
        "00 FC 24 24 24 18 00 00"  # p
        "00 18 24 24 24 FC 80 00"  # q
        "00 00 78 04 04 04 00 00"  # r
        "00 48 54 54 54 20 00 00"  # s
        "00 00 04 3E 44 40 00 00"  # t
        "00 3C 40 40 40 3C 00 00"  # u
        "00 0C 30 40 30 0C 00 00"  # v
        "00 3C 40 38 40 3C 00 00"  # w
        "00 44 28 10 28 44 00 00"  # x
        "00 1C A0 A0 A0 7C 00 00"  # y
        "00 44 64 54 4C 44 00 00"  # z
        "00 08 08 76 42 42 00 00"  # {
        "00 00 00 7E 00 00 00 00"  # |
        "00 42 42 76 08 08 00 00"  # }
        "00 00 04 02 04 02 00 00"  # ~
    )
)