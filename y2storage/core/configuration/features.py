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
from collections.abc import Mapping

from y2storage.core.configuration.base import get_option, ConfigurationDataError
from y2storage.core.constants import PARTITIONING_SECTION
from y2storage.core.size import DiskSize
from y2storage.storage.subvol_specification import SubvolSpecification
from y2storage.storage.volume_specification import VolumeSpecification
from y2storage.storage_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["PartitioningFeatures"]


class PartitioningFeatures(object):
    """The partitioning section of the product features.

    The product features are a tree of nested dictionaries,
    usually read from the control file. Every getter returns
    None if the feature is not specified.
    """

    def __init__(self, product_features=None):
        """Create the features.

        :param product_features: a dictionary or None
        """
        self._product_features = product_features or {}

    @property
    def section(self):
        """The partitioning section.

        :return: a dictionary or None
        """
        section = self._product_features.get(PARTITIONING_SECTION)

        if not isinstance(section, Mapping):
            return None

        return section

    def has_section(self, *names):
        """Are all the given subsections in the partitioning section?"""
        section = self.section

        if section is None:
            return False

        return all(name in section for name in names)

    def _get_option(self, keys, converter=None):
        return get_option(self.section, PARTITIONING_SECTION, keys, converter)

    def feature(self, *keys):
        """Get a raw value of the feature.

        :param keys: a path to the feature
        :return: a value or None
        """
        return self._get_option(keys)

    def integer_feature(self, *keys):
        """Get the feature converted to an integer.

        Values that cannot be converted are ignored.
        """
        try:
            return self._get_option(keys, int)
        except ConfigurationDataError as e:
            log.warning("Ignoring the integer feature: %s", e)
            return None

    def size_feature(self, *keys, legacy_units=False):
        """Get the feature converted to a disk size.

        Sizes that cannot be parsed are ignored.

        :param keys: a path to the feature
        :param legacy_units: should we use the legacy units?
        :return: an instance of DiskSize or None
        """
        def convert(value):
            return DiskSize.parse(value, legacy_units=legacy_units)

        try:
            return self._get_option(keys, convert)
        except ConfigurationDataError as e:
            log.warning("Ignoring the size feature: %s", e)
            return None

    def volumes_feature(self, *keys):
        """Get the list of volume specifications.

        :return: a list of VolumeSpecification instances or None
        """
        return self._get_option(keys, self._convert_volumes)

    @staticmethod
    def _convert_volumes(value):
        return [VolumeSpecification.from_features(v) for v in value]

    def subvolumes_feature(self, *keys):
        """Get the list of subvolume specifications.

        :return: a list of SubvolSpecification instances or None
        """
        return self._get_option(keys, SubvolSpecification.list_from_control_xml)
