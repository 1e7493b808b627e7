#
# storage_loggers.py : provides y2storage specific loggers
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
import logging

from y2storage.core import constants


def get_module_logger(module_name):
    """Return y2storage sub-logger based on a module __name__ attribute.

    The "y2storage." prefix is stripped (if any) and the rest of the
    name is put behind the name of the root logger.
    """
    if module_name.startswith("y2storage."):
        module_name = module_name[len("y2storage."):]
    return logging.getLogger("%s.%s" % (constants.LOGGER_ROOT, module_name))


def get_root_logger():
    return logging.getLogger(constants.LOGGER_ROOT)
