# SPDX-License-Identifier: MIT

__all__ = ['rfc2132_option_codec', 'MAXIMUM_VALUE_LENGTH']

import operator
from ipaddress import IPv4Address, AddressValueError
from struct import Struct, error as StructError
from ..option_codecs import Codec, MAXIMUM_VALUE_LENGTH, check_size
from .registry import register_type, register_codec, get_option
from .rfc2132optiontype import (RFC2132OptionType, NetBIOSNodeType,
	OptionOverload, MessageType)

# NOTE(tori): every codec below is an (encoder, decoder, converter) triple;
# decoders only ever see the value bytes (the tag and length are handled by
# dhcpopts.v4.option), and converters make sure a value that made it into an
# Option can always be encoded and decoded back to itself

uint8 = Struct('!B')
uint16 = Struct('!H')
uint32 = Struct('!I')


def check_length(encoded, length):
	if len(encoded) != length:
		raise ValueError('length must be %d, got %d' % (length, len(encoded)))


def check_minimum(encoded, minimum):
	if len(encoded) < minimum:
		raise ValueError('length must be at least %d, got %d'
			% (minimum, len(encoded)))


def check_stride(encoded, stride, minimum):
	check_minimum(encoded, minimum)
	if len(encoded) % stride != 0:
		raise ValueError('length must be a multiple of %d, got %d'
			% (stride, len(encoded)))


def check_sequence(value):
	if isinstance(value, (str, bytes, bytearray, memoryview)):
		raise TypeError('expected a sequence of values, got %r' % (value,))
	try:
		return tuple(value)
	except TypeError:
		raise TypeError('expected a sequence of values, got %r'
			% (value,)) from None


def chunks(encoded, size):
	return (encoded[i:i + size] for i in range(0, len(encoded), size))


def encode_empty(decoded):
	return b''


def decode_empty(encoded):
	check_length(encoded, 0)
	return None


def convert_empty(value):
	if value is not None:
		raise ValueError('option does not take a value: %r' % (value,))
	return None


def encode_ip(decoded):
	return decoded.packed


def decode_ip(encoded):
	check_length(encoded, 4)
	return IPv4Address(encoded)


def convert_ip(value):
	try:
		return IPv4Address(value)
	except AddressValueError:
		raise ValueError('invalid IP: %r' % (value,)) from None


def encode_ips(decoded):
	return b''.join(value.packed for value in decoded)


def make_ip_list_codec(minimum=4):
	def decode_ips(encoded):
		check_stride(encoded, 4, minimum)
		return tuple(IPv4Address(value) for value in chunks(encoded, 4))

	def convert_ips(value):
		result = tuple(convert_ip(elt) for elt in check_sequence(value))
		check_size(4*len(result), minimum)
		return result

	return (encode_ips, decode_ips, convert_ips)


def encode_ip_pairs(decoded):
	return b''.join(first.packed + second.packed for first, second in decoded)


def decode_ip_pairs(encoded):
	check_stride(encoded, 8, 8)
	return tuple(
		(IPv4Address(pair[0:4]), IPv4Address(pair[4:8]))
		for pair
		in chunks(encoded, 8)
	)


def convert_ip_pair(pair):
	try:
		first, second = check_sequence(pair)
	except ValueError:
		raise ValueError('expected an (address, address) pair, got %r'
			% (pair,)) from None
	return (convert_ip(first), convert_ip(second))


def convert_ip_pairs(value):
	result = tuple(convert_ip_pair(pair) for pair in check_sequence(value))
	check_size(8*len(result), 8)
	return result


def make_integer_codec(struct):
	def decode_integer(encoded):
		check_length(encoded, struct.size)
		result, = struct.unpack(encoded)
		return result

	def convert_integer(value):
		value = operator.index(value)
		try:
			struct.pack(value)
		except StructError:
			raise ValueError('%r does not fit in %d unsigned byte(s)'
				% (value, struct.size)) from None
		return value

	return (struct.pack, decode_integer, convert_integer)


def encode_uint16s(decoded):
	return b''.join(uint16.pack(value) for value in decoded)


def decode_uint16s(encoded):
	check_stride(encoded, uint16.size, uint16.size)
	return tuple(value for value, in uint16.iter_unpack(encoded))


def convert_uint16s(value):
	encoder, decoder, converter = uint16_codec
	result = tuple(converter(elt) for elt in check_sequence(value))
	check_size(uint16.size*len(result), uint16.size)
	return result


def encode_bool(decoded):
	return uint8.pack(1 if decoded else 0)


def decode_bool(encoded):
	check_length(encoded, 1)
	# NOTE(tori): only 0 and 1 are legal, but anything else is surely meant to
	# be true
	return encoded[0] != 0


def convert_bool(value):
	if not isinstance(value, int):
		raise TypeError('expected a bool, got %r' % (value,))
	return bool(value)


def encode_string(decoded):
	return decoded.encode('utf-8')


def make_string_codec(minimum=1):
	def decode_string(encoded):
		check_minimum(encoded, minimum)
		try:
			return encoded.decode('utf-8')
		except UnicodeDecodeError as e:
			raise ValueError('invalid UTF-8 at byte %d (%s)'
				% (e.start, e.reason)) from None

	def convert_string(value):
		if not isinstance(value, str):
			raise TypeError('expected a str, got %r' % (value,))
		check_size(len(encode_string(value)), minimum)
		return value

	return (encode_string, decode_string, convert_string)


def encode_bytes(decoded):
	return decoded


def make_bytes_codec(minimum=0):
	def decode_bytes(encoded):
		check_minimum(encoded, minimum)
		return bytes(encoded)

	def convert_bytes(value):
		if isinstance(value, (str, int)):
			raise TypeError('expected bytes, got %r' % (value,))
		value = bytes(value)
		check_size(len(value), minimum)
		return value

	return (encode_bytes, decode_bytes, convert_bytes)


def make_enum_codec(Enum):
	def decode_enum(encoded):
		check_length(encoded, 1)
		try:
			return Enum(encoded[0])
		except ValueError:
			raise ValueError('%d is not a valid %s'
				% (encoded[0], Enum.__name__)) from None

	def convert_enum(value):
		return Enum(value)

	return (uint8.pack, decode_enum, convert_enum)


def encode_option_codes(decoded):
	return bytes(decoded)


def decode_option_codes(encoded):
	check_minimum(encoded, 1)
	return tuple(get_option(code, ignore_unknown=True) for code in encoded)


def convert_option_codes(value):
	result = []
	for code in check_sequence(value):
		if isinstance(code, str):
			code = get_option(code)
		code = operator.index(code)
		if code not in range(0x100):
			raise ValueError('%r is not an option code' % code)
		result.append(get_option(code, ignore_unknown=True))
	check_size(len(result), 1)
	return tuple(result)


empty_codec = (encode_empty, decode_empty, convert_empty)
ip_codec = (encode_ip, decode_ip, convert_ip)
ip_list_codec = make_ip_list_codec()
ip_pair_codec = (encode_ip_pairs, decode_ip_pairs, convert_ip_pairs)
bool_codec = (encode_bool, decode_bool, convert_bool)
uint8_codec = make_integer_codec(uint8)
uint16_codec = make_integer_codec(uint16)
uint32_codec = make_integer_codec(uint32)
uint16_list_codec = (encode_uint16s, decode_uint16s, convert_uint16s)
string_codec = make_string_codec()
# NOTE(tori): domain names are allowed to be empty (i.e. the root)
domain_codec = make_string_codec(minimum=0)

rfc2132_option_codec = Codec(
	name='rfc2132',
	codecs={
		RFC2132OptionType.PAD: empty_codec,
		RFC2132OptionType.END: empty_codec,
		RFC2132OptionType.SUBNET_MASK: ip_codec,
		RFC2132OptionType.TIME_OFFSET: uint32_codec,
		RFC2132OptionType.ROUTER: ip_list_codec,
		RFC2132OptionType.TIME_SERVER: ip_list_codec,
		RFC2132OptionType.NAME_SERVER: ip_list_codec,
		RFC2132OptionType.DOMAIN_NAME_SERVER: ip_list_codec,
		RFC2132OptionType.LOG_SERVER: ip_list_codec,
		RFC2132OptionType.COOKIE_SERVER: ip_list_codec,
		RFC2132OptionType.LPR_SERVER: ip_list_codec,
		RFC2132OptionType.IMPRESS_SERVER: ip_list_codec,
		RFC2132OptionType.RESOURCE_LOCATION_SERVER: ip_list_codec,
		RFC2132OptionType.HOST_NAME: string_codec,
		RFC2132OptionType.BOOT_FILE_SIZE: uint16_codec,
		RFC2132OptionType.MERIT_DUMP_FILE: string_codec,
		RFC2132OptionType.DOMAIN_NAME: domain_codec,
		RFC2132OptionType.SWAP_SERVER: ip_codec,
		RFC2132OptionType.ROOT_PATH: string_codec,
		RFC2132OptionType.EXTENSIONS_PATH: string_codec,
		RFC2132OptionType.IP_FORWARDING_ENABLE: bool_codec,
		RFC2132OptionType.NONLOCAL_SOURCE_ROUTING_ENABLE: bool_codec,
		RFC2132OptionType.POLICY_FILTER: ip_pair_codec,
		RFC2132OptionType.MAXIMUM_DATAGRAM_REASSEMBLY_SIZE: uint16_codec,
		RFC2132OptionType.DEFAULT_IP_TTL: uint8_codec,
		RFC2132OptionType.PATH_MTU_AGING_TIMEOUT: uint32_codec,
		RFC2132OptionType.PATH_MTU_PLATEAU_TABLE: uint16_list_codec,
		RFC2132OptionType.INTERFACE_MTU: uint16_codec,
		RFC2132OptionType.ALL_SUBNETS_ARE_LOCAL: bool_codec,
		RFC2132OptionType.BROADCAST_ADDRESS: ip_codec,
		RFC2132OptionType.PERFORM_MASK_DISCOVERY: bool_codec,
		RFC2132OptionType.MASK_SUPPLIER: bool_codec,
		RFC2132OptionType.PERFORM_ROUTER_DISCOVERY: bool_codec,
		RFC2132OptionType.ROUTER_SOLICITATION_ADDRESS: ip_codec,
		RFC2132OptionType.STATIC_ROUTE: ip_pair_codec,
		RFC2132OptionType.TRAILER_ENCAPSULATION: bool_codec,
		RFC2132OptionType.ARP_CACHE_TIMEOUT: uint32_codec,
		RFC2132OptionType.ETHERNET_ENCAPSULATION: bool_codec,
		RFC2132OptionType.TCP_DEFAULT_TTL: uint8_codec,
		RFC2132OptionType.TCP_KEEPALIVE_INTERVAL: uint32_codec,
		RFC2132OptionType.TCP_KEEPALIVE_GARBAGE: bool_codec,
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_DOMAIN: domain_codec,
		RFC2132OptionType.NETWORK_INFORMATION_SERVERS: ip_list_codec,
		RFC2132OptionType.NETWORK_TIME_PROTOCOL_SERVERS: ip_list_codec,
		RFC2132OptionType.VENDOR_SPECIFIC_INFORMATION: make_bytes_codec(),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_NAME_SERVER: ip_list_codec,
		RFC2132OptionType.NETBIOS_OVER_TCPIP_DATAGRAM_DISTRIBUTION_SERVER: (
			ip_list_codec
		),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_NODE_TYPE: (
			make_enum_codec(NetBIOSNodeType)
		),
		RFC2132OptionType.NETBIOS_OVER_TCPIP_SCOPE: make_bytes_codec(1),
		RFC2132OptionType.X_WINDOW_SYSTEM_FONT_SERVER: ip_list_codec,
		RFC2132OptionType.X_WINDOW_SYSTEM_DISPLAY_MANAGER: ip_list_codec,
		RFC2132OptionType.REQUESTED_IP_ADDRESS: ip_codec,
		RFC2132OptionType.IP_ADDRESS_LEASE_TIME: uint32_codec,
		RFC2132OptionType.OPTION_OVERLOAD: make_enum_codec(OptionOverload),
		RFC2132OptionType.MESSAGE_TYPE: make_enum_codec(MessageType),
		RFC2132OptionType.SERVER_IDENTIFIER: ip_codec,
		RFC2132OptionType.PARAMETER_REQUEST_LIST: (
			encode_option_codes,
			decode_option_codes,
			convert_option_codes
		),
		RFC2132OptionType.MESSAGE: string_codec,
		RFC2132OptionType.MAXIMUM_DHCP_MESSAGE_SIZE: uint16_codec,
		RFC2132OptionType.RENEWAL_TIME_VALUE: uint32_codec,
		RFC2132OptionType.REBINDING_TIME_VALUE: uint32_codec,
		RFC2132OptionType.VENDOR_CLASS_IDENTIFIER: make_bytes_codec(1),
		RFC2132OptionType.CLIENT_IDENTIFIER: make_bytes_codec(2),
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_PLUS_DOMAIN: (
			domain_codec
		),
		RFC2132OptionType.NETWORK_INFORMATION_SERVICE_PLUS_SERVERS: (
			ip_list_codec
		),
		RFC2132OptionType.TFTP_SERVER_NAME: string_codec,
		RFC2132OptionType.BOOTFILE_NAME: string_codec,
		# NOTE(tori): an empty home agent list means "mobile ip is desired, but
		# no home agents are known"
		RFC2132OptionType.MOBILE_IP_HOME_AGENT: make_ip_list_codec(minimum=0),
		RFC2132OptionType.SIMPLE_MAIL_TRANSPORT_PROTOCOL_SERVER: (
			ip_list_codec
		),
		RFC2132OptionType.POST_OFFICE_PROTOCOL_SERVER: ip_list_codec,
		RFC2132OptionType.NETWORK_NEWS_TRANSPORT_PROTOCOL_SERVER: (
			ip_list_codec
		),
		RFC2132OptionType.DEFAULT_WORLD_WIDE_WEB_SERVER: ip_list_codec,
		RFC2132OptionType.DEFAULT_FINGER_SERVER: ip_list_codec,
		RFC2132OptionType.DEFAULT_INTERNET_RELAY_CHAT_SERVER: ip_list_codec,
		RFC2132OptionType.STREETTALK_SERVER: ip_list_codec,
		RFC2132OptionType.STREETTALK_DIRECTORY_ASSISTANCE_SERVER: (
			ip_list_codec
		),
	}
)

register_type(RFC2132OptionType)
register_codec(rfc2132_option_codec)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
