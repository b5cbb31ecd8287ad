# SPDX-License-Identifier: MIT

import enum

import pytest

from dhcpopts.error import ParsingError
from dhcpopts.option_codecs import Codec, CodecError, OPAQUE_CODEC
from dhcpopts.v4 import (Option, RFC2132OptionType as T, rfc2132_option_codec,
	register_type, unregister_type, register_codec, unregister_codec,
	get_codec, get_option)
from dhcpopts.v4.registry import typelist, is_known


class UserClassOptionType(enum.IntEnum):
	USER_CLASS = 77


def encode_user_class(decoded):
	return b''.join(bytes([len(item)]) + item for item in decoded)


def decode_user_class(encoded):
	items = []
	while encoded:
		length = encoded[0]
		if len(encoded) < length + 1:
			raise ValueError('truncated user class')
		items.append(encoded[1:length + 1])
		encoded = encoded[length + 1:]
	return tuple(items)


def convert_user_class(value):
	return tuple(bytes(item) for item in value)


user_class_codec = Codec(name='user_class', codecs={
	UserClassOptionType.USER_CLASS: (encode_user_class, decode_user_class,
		convert_user_class),
})


@pytest.fixture
def user_class():
	register_type(UserClassOptionType)
	register_codec(user_class_codec)
	yield UserClassOptionType.USER_CLASS
	unregister_codec(user_class_codec)
	unregister_type(UserClassOptionType)


def test_rfc2132_codec_is_complete():
	for tag in T:
		assert tag in rfc2132_option_codec
	assert len(rfc2132_option_codec.codecs) == len(T) == 76
	assert repr(rfc2132_option_codec) == "Codec(name='rfc2132', ncodecs=76)"


def test_unknown_codec():
	with pytest.raises(CodecError):
		get_codec(200)
	with pytest.raises(CodecError):
		rfc2132_option_codec.get_codec(200)
	assert get_codec(200, ignore_unknown=True) is OPAQUE_CODEC


def test_register_rejects_non_codecs():
	with pytest.raises(CodecError):
		register_codec({77: OPAQUE_CODEC})


def test_option_lookup():
	assert get_option(1) is T.SUBNET_MASK
	assert get_option('subnet-mask') is T.SUBNET_MASK
	assert get_option('Subnet_Mask') is T.SUBNET_MASK
	assert get_option(200, ignore_unknown=True) == 200
	with pytest.raises(ValueError):
		get_option(200)
	with pytest.raises(ValueError):
		get_option('no_such_option', ignore_unknown=True)
	assert is_known(53)
	assert not is_known(77)


def test_typelist():
	assert typelist[1] is T.SUBNET_MASK
	assert typelist[200] == 200
	with pytest.raises(IndexError):
		typelist[256]
	with pytest.raises(IndexError):
		typelist[-1]
	known = typelist.known()
	assert len(known) == 76
	assert known[0] is T.PAD and known[-1] is T.END


def test_registered_option(user_class):
	option = Option(77, [b'foo', b'ba'])
	assert option.tag is user_class
	assert option.value == (b'foo', b'ba')
	encoded = bytes(option)
	assert encoded == b'\x4d\x07\x03foo\x02ba'
	assert Option.decode(encoded + b'\xff') == (option, b'\xff')
	assert is_known(77)
	assert user_class in typelist.known()


def test_registered_option_errors(user_class):
	with pytest.raises(ParsingError, match='truncated user class'):
		Option.decode(b'\x4d\x03\x05ab')


def test_unregistered_option_is_unknown(user_class):
	unregister_codec(user_class_codec)
	unregister_type(UserClassOptionType)
	assert not is_known(77)
	assert Option(77, b'\x03foo').value == b'\x03foo'
	# NOTE(tori): unregistering twice is fine, the fixture does it again
	unregister_codec(user_class_codec)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
