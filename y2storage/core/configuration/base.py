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

from y2storage.errors import Y2StorageError


class ConfigurationError(Y2StorageError):
    """A general configuration error."""


class ConfigurationFileError(ConfigurationError):
    """An error in the configuration file."""

    def __init__(self, msg, filename):
        super().__init__(msg)
        self._filename = filename

    def __str__(self):
        return "The following error has occurred while handling the configuration file '{}': " \
               "{}".format(self._filename, super().__str__())


class ConfigurationDataError(ConfigurationError):
    """An error in the configuration data."""

    def __init__(self, msg, section, option):
        super().__init__(msg)
        self._section = section
        self._option = option

    def __str__(self):
        return "The following error has occurred while handling the option '{}' in the section " \
               "'{}': {}".format(self._option, self._section, super().__str__())


def find_value(tree, keys):
    """Find a value in a tree of nested mappings.

    :param tree: a mapping or None
    :param keys: a sequence of keys
    :return: a value or None if any key on the path is missing
    """
    value = tree

    for key in keys:
        if not isinstance(value, Mapping):
            return None

        value = value.get(key)

    return value


def get_option(tree, section_name, keys, converter=None):
    """Get a converted value of the option.

    The converter should accept the raw value and return a converted
    value. For example: int

    Missing options are returned as None and never converted.

    :param tree: a tree of nested mappings
    :param section_name: a name of the tree used in the error messages
    :param keys: a sequence of keys
    :param converter: a function or None
    :return: a converted value or None
    :raises: ConfigurationDataError
    """
    value = find_value(tree, keys)

    if value is None or converter is None:
        return value

    try:
        return converter(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationDataError(str(e), section_name, "/".join(keys)) from e
