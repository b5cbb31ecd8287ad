"""dhcpopts.v4

DHCPv4 (RFC 2132) option codec

"""

__author__ = 'Tori Wolf <wiredwolf@wiredwolf.gg>'
__date__ = '2023-10-02'
# SPDX-License-Identifier: MIT
__license__ = 'MIT'
__copyright__ = '2023 Tori Wolf'

try:
	from .rfc2132 import *
	from .rfc2132 import __all__ as rfc2132_all
	from .option import *
	from .option import __all__ as option_all
	from .options import *
	from .options import __all__ as options_all
	from .registry import *
	from .registry import __all__ as registry_all
except ImportError as e:
	print('Could not import DHCPv4 options: %r' % e)
	raise

__all__ = [
	*rfc2132_all,
	*option_all,
	*options_all,
	*registry_all
]

# NOTE(tori): rfc2132 - done
# NOTE(tori): rfc3396 - out of scope, options longer than 255 bytes are not
# split or joined

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
