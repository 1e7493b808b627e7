#
# Sets of volume specifications.
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
from y2storage.core.constants import VolumeSetType

__all__ = ["VolumeSpecificationsSet"]


class VolumeSpecificationsSet(object):
    """A set of volume specifications allocated together.

    All the volumes of the set must be located in the same disk,
    either as partitions or inside the same LVM volume group.
    """

    def __init__(self, volumes, set_type):
        """Create a new set.

        :param volumes: a list of VolumeSpecification instances
        :param set_type: a type of the set
        """
        self._volumes = list(volumes)
        self._type = VolumeSetType.from_value(set_type)

    @property
    def volumes(self):
        """The volume specifications of the set."""
        return self._volumes

    @property
    def type(self):
        """The type of the set.

        :return: an instance of VolumeSetType
        """
        return self._type

    @property
    def vg_name(self):
        """Name of the separate volume group.

        :return: a string or None if this is not a separate LVM set
        """
        if self._type is not VolumeSetType.SEPARATE_LVM or not self._volumes:
            return None

        return self._volumes[0].separate_vg_name

    def push(self, volume):
        """Add a volume specification to the set."""
        self._volumes.append(volume)

    @property
    def device(self):
        """Name of the device where the set is allocated.

        :return: a string or None
        """
        if not self._volumes:
            return None

        return self._volumes[0].device

    @device.setter
    def device(self, name):
        for volume in self._volumes:
            volume.device = name

    @property
    def proposed(self):
        """Is any of the volumes proposed?"""
        return any(v.proposed for v in self._volumes)

    @property
    def root(self):
        """Does the set contain the root volume?"""
        return any(v.root for v in self._volumes)

    def __str__(self):
        return "<VolumeSpecificationsSet type={} vg_name={} volumes={}>".format(
            self._type, self.vg_name, [v.mount_point for v in self._volumes]
        )

    __repr__ = __str__
