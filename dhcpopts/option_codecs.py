# SPDX-License-Identifier: MIT

__all__ = ['CodecError', 'Codec', 'CodecRegistry', 'OPAQUE_CODEC',
	'MAXIMUM_VALUE_LENGTH', 'check_size']

from .error import Error


class CodecError(Error):
	pass


# NOTE(tori): the length byte limits every option value to this many bytes
MAXIMUM_VALUE_LENGTH = 0xFF


def check_size(size, minimum=0):
	if size > MAXIMUM_VALUE_LENGTH:
		raise ValueError('encoded value is %d bytes long, at most %d fit in '
			'an option' % (size, MAXIMUM_VALUE_LENGTH))
	if size < minimum:
		raise ValueError('encoded value is %d bytes long, at least %d are '
			'required' % (size, minimum))


def _identity_encoder(decoded):
	return bytes(decoded)


def _identity_decoder(encoded):
	return bytes(encoded)


def _identity_converter(value):
	if value is None:
		return b''
	if isinstance(value, (str, int)):
		raise TypeError('expected bytes, got %r' % (value,))
	value = bytes(value)
	check_size(len(value))
	return value


# NOTE(tori): used for option codes nobody registered a codec for; the payload
# is carried around as raw bytes
OPAQUE_CODEC = (_identity_encoder, _identity_decoder, _identity_converter)


class Codec:
	"""A named table of option codecs

	Each entry maps an option tag to an ``(encoder, decoder, converter)``
	triple: the encoder turns a converted value into the value bytes, the
	decoder turns the value bytes back into a value (raising ValueError on
	malformed input), and the converter normalizes a caller-supplied value
	(raising ValueError or TypeError when it could not be encoded).
	"""

	def __init__(self, *, name=None, codecs=None):
		if name is None:
			name = 'codec_%s' % id(self)
		self.name = name
		if codecs is None:
			codecs = {}
		self.codecs = codecs

	def get_codec(self, option):
		try:
			return self.codecs[option]
		except KeyError:
			raise CodecError('option %r cannot be encoded by this codec (%s)'
				% (option, self.name)
			) from None

	def __contains__(self, option):
		return option in self.codecs

	def __repr__(self):
		return '%s(name=%r, ncodecs=%d)' % (type(self).__name__, self.name,
			len(self.codecs))


class CodecRegistry:
	def __init__(self):
		self.option_codecs = []

	def register(self, option_codec, priority=None):
		if not isinstance(option_codec, Codec):
			raise CodecError('%r is not an instance of Codec' % option_codec)
		if priority is None:
			priority = len(self.option_codecs)
		self.option_codecs.insert(priority, option_codec)

	def unregister(self, option_codec):
		try:
			self.option_codecs.remove(option_codec)
		except ValueError:
			pass

	def get(self, value, ignore_unknown=False):
		for option_codec in self.option_codecs:
			try:
				return option_codec.get_codec(value)
			except CodecError:
				continue
		else:
			if ignore_unknown:
				return OPAQUE_CODEC
			else:
				raise CodecError(
					'%r is not a valid option for all registered option codecs'
					% value
				)

	def encode(self, option, value, ignore_unknown=False):
		encoder, decoder, converter = self.get(option, ignore_unknown)
		return encoder(value)

	def decode(self, option, value, ignore_unknown=False):
		encoder, decoder, converter = self.get(option, ignore_unknown)
		return decoder(value)

	def convert(self, option, value, ignore_unknown=False):
		encoder, decoder, converter = self.get(option, ignore_unknown)
		return converter(value)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
