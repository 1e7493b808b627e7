#
# Options of the MD RAID devices.
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
from y2storage.core.constants import SettingsEnum
from y2storage.core.size import DiskSize

__all__ = ["MdLevel", "default_chunk_size", "chunk_sizes", "parity_supported",
           "minimal_number_of_devices"]


class MdLevel(SettingsEnum):
    """Level of a MD RAID."""
    RAID0 = "raid0"
    RAID1 = "raid1"
    RAID5 = "raid5"
    RAID6 = "raid6"
    RAID10 = "raid10"


# Levels with a configurable parity algorithm.
PARITY_LEVELS = (MdLevel.RAID5, MdLevel.RAID6, MdLevel.RAID10)

MIN_DEVICES = {
    MdLevel.RAID0: 2,
    MdLevel.RAID1: 2,
    MdLevel.RAID5: 3,
    MdLevel.RAID6: 4,
    MdLevel.RAID10: 2,
}

MAX_CHUNK_SIZE = DiskSize.MiB(64)


def default_chunk_size(level):
    """Return the default chunk size for the given level.

    :param level: an instance of MdLevel or its value
    :return: an instance of DiskSize
    """
    level = MdLevel.from_value(level)

    if level is MdLevel.RAID1:
        return DiskSize.KiB(4)

    if level in (MdLevel.RAID5, MdLevel.RAID6):
        return DiskSize.KiB(128)

    return DiskSize.KiB(64)


def chunk_sizes(level):
    """Return the chunk sizes that can be used for the given level.

    The sizes are powers of two from the smaller of the default
    size and 64 KiB up to 64 MiB.

    :param level: an instance of MdLevel or its value
    :return: a list of DiskSize instances
    """
    size = min(default_chunk_size(level), DiskSize.KiB(64))
    sizes = []

    while size <= MAX_CHUNK_SIZE:
        sizes.append(size)
        size = size * 2

    return sizes


def parity_supported(level):
    """Can be the parity algorithm set for the given level?"""
    return MdLevel.from_value(level) in PARITY_LEVELS


def minimal_number_of_devices(level):
    """Return the minimal number of devices of the RAID."""
    return MIN_DEVICES[MdLevel.from_value(level)]
