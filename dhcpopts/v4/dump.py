# SPDX-License-Identifier: MIT

"""dhcpopts.v4.dump

Print the options found in a DHCPv4 options area, e.g.::

	$ dhcpopts-dump 63825363 350101 0104ffffff00 ff --skip-cookie
	 53 message type: DISCOVER
	  1 subnet mask: 255.255.255.0

"""

import argparse
import enum
import logging
import sys
from ipaddress import IPv4Address

from .options import DHCP_MAGIC_COOKIE, iter_options
from .registry import typelist
from ..error import ParsingError
from ..debug_helpers.hexdump import format_hexdump, write_hexdump

LOG_LEVELS = ('ALL', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def configure_logging(output='-', level='INFO'):
	if isinstance(output, str):
		if output == '-':
			log_handler = logging.StreamHandler(sys.stderr)
		else:
			log_handler = logging.FileHandler(output)
	else:
		log_handler = logging.StreamHandler(output)

	log_format = '{asctime}|{name}|{levelname}|{message}'
	log_formatter = logging.Formatter(log_format, style='{')
	log_handler.setFormatter(log_formatter)

	# NOTE(tori): configure the package logger, so the library modules'
	# loggers end up here too
	logger = logging.getLogger('dhcpopts')
	for handler in list(logger.handlers):
		logger.removeHandler(handler)
		handler.close()
	logger.addHandler(log_handler)

	logger.setLevel(level)

	return logger


def parse_hex(words):
	text = ''.join(words).replace(':', '')
	return bytes.fromhex(''.join(text.split()))


def format_value(value):
	if value is None:
		return ''
	if isinstance(value, enum.Enum):
		return value.name
	if isinstance(value, IPv4Address):
		return str(value)
	if isinstance(value, (bytes, bytearray)):
		return value.hex(' ')
	if isinstance(value, str):
		return repr(value)
	if isinstance(value, tuple):
		if value and all(isinstance(elt, tuple) for elt in value):
			return ', '.join('%s/%s' % pair for pair in value)
		return ', '.join(format_value(elt) for elt in value)
	return str(value)


def format_option(option):
	return '%3d %s: %s' % (option.tag, option.description,
		format_value(option.value))


def list_options(output):
	for tag in typelist.known():
		print('%3d %s' % (tag, tag.description), file=output)


def main(argv=None, output=None):
	parser = argparse.ArgumentParser(prog='dhcpopts-dump',
		description='decode the options area of a DHCPv4 message')
	parser.add_argument('-f', '--log-file', default='-', metavar='FILE',
		help='location to log messages (default: stderr)')
	parser.add_argument('-l', '--log-level', default='WARNING',
		choices=LOG_LEVELS, type=str.upper,
		help='verbosity of log messages, in descending order')
	parser.add_argument('-i', '--input', default=None,
		type=argparse.FileType('rb'),
		help='read the raw options area from a file (- for stdin)')
	parser.add_argument('--skip-cookie', action='store_true',
		help='strip the DHCP magic cookie from the start of the data')
	parser.add_argument('--ignore-unknown', action='store_true',
		help='keep options with unknown codes as raw data')
	parser.add_argument('--hexdump', action='store_true',
		help='show the encoding of every option')
	parser.add_argument('--hexdump-file', default=None, metavar='FILE',
		help='write a hexdump of the options area to FILE')
	parser.add_argument('--list', action='store_true',
		help='list the supported options and exit')
	parser.add_argument('hex', metavar='HEX', nargs='*',
		help='options area, in hexadecimal')
	args = parser.parse_args(argv)
	if output is None:
		output = sys.stdout

	# NOTE(tori): NOTSET (0) would defer to the root logger, 1 lets everything
	# through
	level = 1 if args.log_level == 'ALL' else getattr(logging, args.log_level)
	logger = configure_logging(output=args.log_file, level=level)

	if args.list:
		list_options(output)
		return 0

	if args.input is not None:
		if args.hex:
			parser.error('HEX and --input are mutually exclusive')
		with args.input:
			raw_data = args.input.read()
	else:
		try:
			raw_data = parse_hex(args.hex)
		except ValueError:
			parser.error('invalid hexadecimal data: %r' % ' '.join(args.hex))

	if args.skip_cookie:
		if raw_data[:len(DHCP_MAGIC_COOKIE)] != DHCP_MAGIC_COOKIE:
			logger.warning('bad magic cookie: %r',
				raw_data[:len(DHCP_MAGIC_COOKIE)])
		else:
			raw_data = raw_data[len(DHCP_MAGIC_COOKIE):]

	if args.hexdump_file is not None:
		write_hexdump(raw_data, args.hexdump_file)
		logger.info('wrote hexdump of %d bytes to %s', len(raw_data),
			args.hexdump_file)

	count = 0
	try:
		for option in iter_options(raw_data,
				ignore_unknown=args.ignore_unknown):
			print(format_option(option), file=output)
			if args.hexdump:
				print(format_hexdump(bytes(option)), file=output)
			count += 1
	except ParsingError as e:
		logger.error('could not decode option %d (caused by %s)', count + 1,
			e)
		return 1

	logger.info('decoded %d options from %d bytes', count, len(raw_data))
	return 0


if __name__ == '__main__':
	sys.exit(main())

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
