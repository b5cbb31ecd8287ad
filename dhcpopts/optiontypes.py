# SPDX-License-Identifier: MIT

__all__ = ['TypeRegistry', 'TypeList']


class TypeRegistry:
	"""Resolves option codes (or option names) to registered tag enums"""

	def __init__(self):
		self.OptionTypes = []

	def register(self, OptionType, priority=None):
		if priority is None:
			priority = len(self.OptionTypes)
		self.OptionTypes.insert(priority, OptionType)

	def unregister(self, OptionType):
		try:
			self.OptionTypes.remove(OptionType)
		except ValueError:
			pass

	@staticmethod
	def _lookup(OptionType, value):
		if isinstance(value, str):
			# NOTE(tori): 'subnet_mask', 'SUBNET_MASK' and 'subnet-mask' all
			# name the same option
			try:
				return OptionType[value.upper().replace('-', '_')]
			except KeyError:
				raise ValueError('%r is not a %s name'
					% (value, OptionType.__name__)) from None
		return OptionType(value)

	def get(self, value, ignore_unknown=False):
		for OptionType in self.OptionTypes:
			try:
				return self._lookup(OptionType, value)
			except ValueError:
				continue
		else:
			if ignore_unknown and isinstance(value, int):
				return value
			raise ValueError(
				'%r is not a valid option for all registered option types'
				% value
			)

	def is_known(self, value):
		try:
			self.get(value)
		except ValueError:
			return False
		return True


class TypeList:
	def __init__(self, registry, ntypes=256):
		self.ntypes = ntypes
		self.registry = registry

	def __getitem__(self, index):
		if index not in range(self.ntypes):
			raise IndexError('%r is not an option type' % index)
		return self.registry.get(index, ignore_unknown=True)

	def __iter__(self):
		return (self.registry.get(n, ignore_unknown=True)
			for n in range(self.ntypes))

	def known(self):
		return [option for option in self
			if self.registry.is_known(option)]

# NOTE(tori): option type enumerations SHOULD be of the format
# <name>OptionType and be a subclass of enum.IntEnum

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
