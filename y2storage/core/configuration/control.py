#
# Reader of the product control file.
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
import xml.etree.ElementTree as ElementTree

from y2storage.core.configuration.base import ConfigurationFileError, ConfigurationDataError
from y2storage.core.constants import CONTROL_CONFIG_NAMESPACE
from y2storage.storage_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["read_control_file", "parse_control_xml"]

TYPE_ATTRIBUTE = "{%s}type" % CONTROL_CONFIG_NAMESPACE


def read_control_file(path):
    """Read the product features from a control file.

    :param path: a path to the file
    :return: a dictionary with the product features
    :raises: ConfigurationFileError
    """
    log.debug("Reading the control file %s.", path)

    try:
        with open(path, "r") as f:
            content = f.read()

        return parse_control_xml(content)

    except (ConfigurationDataError, OSError) as e:
        raise ConfigurationFileError(str(e), path) from e


def parse_control_xml(content):
    """Parse the product features from a string.

    The values are converted according to their config:type
    attribute. Elements with children are converted into
    dictionaries, lists are converted into lists and the rest
    is kept as stripped strings.

    :param content: a string with the XML document
    :return: a dictionary with the product features
    :raises: ConfigurationDataError
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise ConfigurationDataError(str(e), "xml", "document") from e

    return _convert_mapping(root)


def _local_name(element):
    """Return the tag of the element without the namespace."""
    return element.tag.rsplit("}", 1)[-1]


def _convert_element(element):
    """Convert the element into a Python value."""
    config_type = element.get(TYPE_ATTRIBUTE)

    if config_type == "list":
        return [_convert_element(child) for child in element]

    if config_type is None and len(element):
        return _convert_mapping(element)

    text = (element.text or "").strip()

    if config_type == "boolean":
        return _convert_boolean(element, text)

    if config_type == "integer":
        return _convert_integer(element, text)

    # Symbols and strings.
    return text


def _convert_mapping(element):
    return {_local_name(child): _convert_element(child) for child in element}


def _convert_boolean(element, text):
    if text.lower() not in ("true", "false"):
        raise ConfigurationDataError(
            "Invalid boolean value: {}".format(text), "control", _local_name(element)
        )

    return text.lower() == "true"


def _convert_integer(element, text):
    try:
        return int(text)
    except ValueError as e:
        raise ConfigurationDataError(str(e), "control", _local_name(element)) from e
