# SPDX-License-Identifier: MIT

__all__ = ['format_hexdump', 'write_hexdump']


def format_hexdump(data, width=0x10):
	data = bytes(data)
	rows = []
	for i in range(0, len(data), width):
		offset = '%08X' % i
		row = ' '.join('%02X' % byte for byte in data[i:i + width])
		rows.append('%s:\t%s' % (offset, row))
	return '\n'.join(rows)


# NOTE(tori): the output can be loaded into wireshark with "import from hex
# dump" (or text2pcap) once it's wrapped in the rest of a packet
def write_hexdump(data, filename='wireshark-hexdump.txt'):
	with open(filename, 'w') as hexdump:
		hexdump.write(format_hexdump(data))
		hexdump.write('\n')

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
