#
# Disk sizes.
#
# Copyright (C) 2019 Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
# 02110-1301, USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#
import re
from decimal import Decimal, InvalidOperation
from functools import total_ordering

__all__ = ["DiskSize"]

BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]
DECIMAL_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]

SIZE_REGEX = re.compile(r"^(\d+(?:\.\d+)?)\s*([a-zA-Z]*)$")


def _get_multipliers(legacy_units):
    """Return a mapping of lower-cased unit names to multipliers.

    :param legacy_units: treat the decimal units as the binary ones
    :return: a dictionary
    """
    multipliers = {}

    for exp, unit in enumerate(BINARY_UNITS):
        multipliers[unit.lower()] = 1024 ** exp

    for exp, unit in enumerate(DECIMAL_UNITS):
        base = 1024 if legacy_units else 1000
        multipliers[unit.lower()] = base ** exp

    # Single letters are always binary: K, M, G, ...
    for exp, unit in enumerate(BINARY_UNITS[1:], 1):
        multipliers[unit[0].lower()] = 1024 ** exp

    return multipliers


@total_ordering
class DiskSize(object):
    """A size of a disk or a volume.

    The size is a number of bytes or unlimited. The unlimited
    size is greater than any other size.
    """

    def __init__(self, size=0):
        """Create a new size.

        :param size: a number of bytes
        """
        size = int(size)

        if size < 0:
            raise ValueError("The size cannot be negative: {}".format(size))

        self._bytes = size
        self._unlimited = False

    @classmethod
    def unlimited(cls):
        """Return the unlimited size."""
        size = cls()
        size._unlimited = True
        return size

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def B(cls, value):
        return cls._from_unit(value, "B")

    @classmethod
    def KiB(cls, value):
        return cls._from_unit(value, "KiB")

    @classmethod
    def MiB(cls, value):
        return cls._from_unit(value, "MiB")

    @classmethod
    def GiB(cls, value):
        return cls._from_unit(value, "GiB")

    @classmethod
    def TiB(cls, value):
        return cls._from_unit(value, "TiB")

    @classmethod
    def _from_unit(cls, value, unit):
        exp = BINARY_UNITS.index(unit)
        return cls(Decimal(str(value)) * 1024 ** exp)

    @classmethod
    def parse(cls, text, legacy_units=False):
        """Parse a human readable size.

        For example: "10 GiB", "512MiB", "5G", "1.5 TB" or "unlimited".

        With legacy units, the decimal units (KB, MB, GB, ...) are
        considered to be powers of two, like the binary ones.

        :param text: a string with the size
        :param legacy_units: True or False
        :return: an instance of DiskSize
        :raise ValueError: if the string is not a valid size
        """
        if isinstance(text, DiskSize):
            return text

        value = str(text).strip()

        if value.lower() == "unlimited":
            return cls.unlimited()

        match = SIZE_REGEX.match(value)

        if not match:
            raise ValueError("'{}' is not a valid size".format(text))

        number, unit = match.groups()
        multipliers = _get_multipliers(legacy_units)
        unit = unit.lower() or "b"

        if unit not in multipliers:
            raise ValueError("Unknown unit '{}' in '{}'".format(unit, text))

        try:
            number = Decimal(number)
        except InvalidOperation:
            raise ValueError("'{}' is not a valid size".format(text)) from None

        return cls(number * multipliers[unit])

    @property
    def is_unlimited(self):
        return self._unlimited

    def to_bytes(self):
        """Return the number of bytes.

        :raise ValueError: if the size is unlimited
        """
        if self._unlimited:
            raise ValueError("The unlimited size has no number of bytes.")

        return self._bytes

    def __int__(self):
        return self.to_bytes()

    def __add__(self, other):
        other = self._coerce(other)

        if self._unlimited or other.is_unlimited:
            return DiskSize.unlimited()

        return DiskSize(self._bytes + other.to_bytes())

    __radd__ = __add__

    def __mul__(self, factor):
        if not isinstance(factor, (int, float, Decimal)):
            return NotImplemented

        if self._unlimited:
            return DiskSize.unlimited()

        return DiskSize(Decimal(self._bytes) * Decimal(str(factor)))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, DiskSize):
            return NotImplemented

        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, DiskSize):
            return NotImplemented

        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self._unlimited, self._bytes)

    @staticmethod
    def _coerce(other):
        if isinstance(other, DiskSize):
            return other

        return DiskSize(other)

    def human_readable(self):
        """Return a human readable representation.

        For example: "10 GiB", "1.50 KiB" or "unlimited".
        """
        if self._unlimited:
            return "unlimited"

        exp = 0
        while exp < len(BINARY_UNITS) - 1 and self._bytes >= 1024 ** (exp + 1):
            exp += 1

        unit = BINARY_UNITS[exp]
        value = Decimal(self._bytes) / 1024 ** exp

        if value == value.to_integral_value():
            return "{} {}".format(int(value), unit)

        return "{:.2f} {}".format(value, unit)

    def __str__(self):
        return self.human_readable()

    def __repr__(self):
        return "DiskSize('{}')".format(self.human_readable())
