# SPDX-License-Identifier: MIT

__all__ = ['DHCP_MAGIC_COOKIE', 'iter_options', 'decode_options',
	'encode_options']

import logging

from .option import Option
from .rfc2132 import RFC2132OptionType

logger = logging.getLogger(__name__)

DHCP_MAGIC_COOKIE = b'\x63\x82\x53\x63'


def iter_options(raw_data, *, skip_pad=True, stop_at_end=True,
	ignore_unknown=False):
	"""Decode options one after the other from an options area

	``raw_data`` starts right after the magic cookie. Iteration stops when
	the data runs out or (with ``stop_at_end``) after an END option; the END
	option itself is not yielded. A malformed option raises ParsingError, and
	nothing after it is decoded.
	"""
	raw_data = bytes(raw_data)
	while raw_data:
		option, raw_data = Option.decode(raw_data,
			ignore_unknown=ignore_unknown)
		if option.tag == RFC2132OptionType.END and stop_at_end:
			if raw_data.strip(b'\0'):
				logger.debug('ignoring %d bytes after end option',
					len(raw_data))
			return
		if option.tag == RFC2132OptionType.PAD and skip_pad:
			continue
		yield option
	if stop_at_end:
		logger.debug('no end option')


def check_option(option):
	if isinstance(option, Option):
		return option
	try:
		tag, value = option
	except (TypeError, ValueError):
		raise TypeError('not supported: %r' % (option,)) from None
	return Option(tag, value)


def decode_options(raw_data, **kwargs):
	return list(iter_options(raw_data, **kwargs))


def encode_options(options, *, end=True, pad_length=None):
	"""Encode options in the given order

	Appends an END option unless ``end`` is false or the last option already
	is one, then PAD options until the result is ``pad_length`` bytes long (if
	given).
	"""
	options = [check_option(option) for option in options]
	opts = b''.join(bytes(option) for option in options)
	if end and not (options and options[-1].tag == RFC2132OptionType.END):
		opts += bytes(Option(RFC2132OptionType.END))
	if pad_length is not None:
		pad_needed = max(0, pad_length - len(opts))
		opts += bytes(Option(RFC2132OptionType.PAD))*pad_needed
	return opts

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
