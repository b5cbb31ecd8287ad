# SPDX-License-Identifier: MIT

__all__ = ['Option', 'encode_option', 'decode_option']

import logging
from collections import namedtuple

# NOTE(tori): the rfc2132 import also registers the option type and codec, so
# don't remove it
from .rfc2132 import RFC2132OptionType
from .registry import get_option, get_codec, OPTION_CODES
from ..error import ParsingError

logger = logging.getLogger(__name__)

# NOTE(tori): these two are a lone tag byte on the wire, no length, no value
EMPTY_OPTIONS = (RFC2132OptionType.PAD, RFC2132OptionType.END)


def describe(tag):
	try:
		return tag.description
	except AttributeError:
		return 'option %d' % tag


class Option(namedtuple('Option', 'tag value')):
	"""A single DHCPv4 option

	``tag`` is an option type enumeration member (see RFC2132OptionType), or a
	plain int for options decoded with ``ignore_unknown``, and ``value`` is the
	decoded payload, e.g.::

		>>> Option(RFC2132OptionType.SUBNET_MASK, '255.255.255.0')
		Option(SUBNET_MASK, IPv4Address('255.255.255.0'))
		>>> Option('router', ['192.168.0.1', '192.168.0.2']).encode()
		b'\\x03\\x08\\xc0\\xa8\\x00\\x01\\xc0\\xa8\\x00\\x02'

	Values are normalized when the option is built (addresses become
	IPv4Address, lists become tuples, ...), and anything that would not fit
	in an option is rejected with ValueError or TypeError, so encoding an
	Option never fails.
	"""

	__slots__ = ()

	def __new__(cls, tag, value=None):
		tag = get_option(tag, ignore_unknown=True)
		if tag not in range(OPTION_CODES):
			raise ValueError('%r is not an option code' % (tag,))
		encoder, decoder, converter = get_codec(tag, ignore_unknown=True)
		return super().__new__(cls, tag, converter(value))

	@property
	def description(self):
		return describe(self.tag)

	def encode(self):
		if self.tag in EMPTY_OPTIONS:
			return bytes([self.tag])
		encoder, decoder, converter = get_codec(self.tag, ignore_unknown=True)
		value = encoder(self.value)
		return bytes([self.tag, len(value)]) + value

	__bytes__ = encode

	@classmethod
	def decode(cls, data, ignore_unknown=False):
		"""Decode the option at the start of ``data``

		Returns ``(option, remainder)``, where remainder is everything after
		the option; raises ParsingError if the option is malformed or (unless
		``ignore_unknown`` is set) of a type that isn't registered.
		"""
		data = bytes(data)
		if not data:
			raise ParsingError('no option code found')
		code, data = data[0], data[1:]

		known = True
		try:
			tag = get_option(code)
		except ValueError:
			if not ignore_unknown:
				raise ParsingError('unknown option code: %d' % code) from None
			tag = code
			known = False

		if tag in EMPTY_OPTIONS:
			return cls._make((tag, None)), data

		name = describe(tag)
		if not data:
			raise ParsingError('could not parse %s: no length found' % name)
		length, data = data[0], data[1:]
		if len(data) < length:
			raise ParsingError('could not parse %s: length is %d, but only %d '
				'bytes are left' % (name, length, len(data)))
		encoded, data = data[:length], data[length:]

		encoder, decoder, converter = get_codec(tag, ignore_unknown=True)
		try:
			value = decoder(encoded)
		except ValueError as e:
			raise ParsingError('could not parse %s: %s' % (name, e)) from None

		if not known:
			logger.debug('kept unknown option %d (%d bytes) as raw data', code,
				length)
		return cls._make((tag, value)), data

	def __repr__(self):
		return '%s(%s, %r)' % (type(self).__name__,
			getattr(self.tag, 'name', self.tag), self.value)


def encode_option(option):
	return option.encode()


def decode_option(data, ignore_unknown=False):
	return Option.decode(data, ignore_unknown=ignore_unknown)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
