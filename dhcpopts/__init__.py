"""dhcpopts

Standards-compliant DHCP option codec

"""

__author__ = 'Tori Wolf <wiredwolf@wiredwolf.gg>'
__version__ = '0.1.0'
__date__ = '2023-10-02'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'
__copyright__ = '2023 Tori Wolf'

try:
	from . import v4 as ipv4
	from .error import Error, DHCPv4Error, ParsingError
except ImportError as e:
	print('Could not import dhcpopts: %r' % e)
	raise

__all__ = ['ipv4', 'Error', 'DHCPv4Error', 'ParsingError']

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
