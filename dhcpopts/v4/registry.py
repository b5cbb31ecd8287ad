# SPDX-License-Identifier: MIT

"""DHCPv4 option registries

Option type enumerations (tag lookup) and option codecs (payload encoding)
register themselves here when their module is imported; Option resolves
everything through these two registries.
"""

__all__ = ['register_type', 'unregister_type', 'get_option', 'is_known',
	'register_codec', 'unregister_codec', 'get_codec', 'typelist']

from ..optiontypes import TypeRegistry, TypeList
from ..option_codecs import CodecRegistry

OPTION_CODES = 0x100

type_registry = TypeRegistry()
codec_registry = CodecRegistry()

register_type = type_registry.register
unregister_type = type_registry.unregister
get_option = type_registry.get
is_known = type_registry.is_known

register_codec = codec_registry.register
unregister_codec = codec_registry.unregister
get_codec = codec_registry.get

typelist = TypeList(type_registry, OPTION_CODES)

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
