# SPDX-License-Identifier: MIT

__all__ = ['Error', 'DHCPv4Error', 'ParsingError']


class Error(Exception):
	"""Base class for dhcpopts errors"""
	pass


class DHCPv4Error(Error):
	"""Base class for DHCPv4 errors"""
	pass


class ParsingError(DHCPv4Error):
	"""Raised when the bytes of an option are structurally invalid"""

	def __init__(self, message):
		super().__init__(message)
		self.message = message

	def __str__(self):
		return 'Parsing Error: %s' % self.message

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
