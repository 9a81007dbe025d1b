"""
lib/Utils.py

Purpose:
Small, stateless helpers shared by the data model and the FSOps: open-flag parsing, permission-mode parsing, encoding-name normalization and full-length read / write loops over raw descriptors.

Place in Architecture:
Leaf module. Everything here operates on plain values or raw file descriptors.

Interface:

	parse_flags(flag): open-mode flag string (e.g. 'a', 'wx+') -> os.O_* bits.
	parse_mode(mode): int or octal string -> permission bits.
	normalize_encoding(encoding): encoding alias -> canonical name.
	decode_hex(text): hex digit pairs -> bytes, stopping at the first pair that is not hex.
	WriteAll(fd, data): write every byte of data to fd; RETURNS bytes written.
	ReadAll(fd): read fd until EOF; RETURNS bytes.

TODOs/FIXMEs:
None.
"""

import os
import re
import errno
import codecs
import string
import logging

from .Errors import InvalidOptionError

# Reads are done in 128 KiB blocks.
BLOCK_SIZE = 131072

DEFAULT_MODE = 0o666

_O_SYNC = getattr(os, 'O_SYNC', 0)
_O_EXTRA = getattr(os, 'O_CLOEXEC', 0) | getattr(os, 'O_BINARY', 0)

FLAGS = {
	'r': os.O_RDONLY,
	'rs+': os.O_RDWR | _O_SYNC,
	'sr+': os.O_RDWR | _O_SYNC,
	'r+': os.O_RDWR,

	'w': os.O_TRUNC | os.O_CREAT | os.O_WRONLY,
	'wx': os.O_TRUNC | os.O_CREAT | os.O_WRONLY | os.O_EXCL,
	'xw': os.O_TRUNC | os.O_CREAT | os.O_WRONLY | os.O_EXCL,
	'w+': os.O_TRUNC | os.O_CREAT | os.O_RDWR,
	'wx+': os.O_TRUNC | os.O_CREAT | os.O_RDWR | os.O_EXCL,
	'xw+': os.O_TRUNC | os.O_CREAT | os.O_RDWR | os.O_EXCL,

	'a': os.O_APPEND | os.O_CREAT | os.O_WRONLY,
	'ax': os.O_APPEND | os.O_CREAT | os.O_WRONLY | os.O_EXCL,
	'xa': os.O_APPEND | os.O_CREAT | os.O_WRONLY | os.O_EXCL,
	'as': os.O_APPEND | os.O_CREAT | os.O_WRONLY | _O_SYNC,
	'sa': os.O_APPEND | os.O_CREAT | os.O_WRONLY | _O_SYNC,
	'a+': os.O_APPEND | os.O_CREAT | os.O_RDWR,
	'ax+': os.O_APPEND | os.O_CREAT | os.O_RDWR | os.O_EXCL,
	'xa+': os.O_APPEND | os.O_CREAT | os.O_RDWR | os.O_EXCL,
	'as+': os.O_APPEND | os.O_CREAT | os.O_RDWR | _O_SYNC,
	'sa+': os.O_APPEND | os.O_CREAT | os.O_RDWR | _O_SYNC,
}

# Buffer-style encoding names and what they mean to Python.
# 'hex' and 'base64' are not text codecs; Payload decodes them itself.
ENCODINGS = {
	'utf8': 'utf-8',
	'utf-8': 'utf-8',
	'ucs2': 'utf-16-le',
	'ucs-2': 'utf-16-le',
	'utf16le': 'utf-16-le',
	'utf-16le': 'utf-16-le',
	'latin1': 'latin-1',
	'binary': 'latin-1',
	'ascii': 'ascii',
	'hex': 'hex',
	'base64': 'base64',
}

_OCTAL_RE = re.compile(r'^\s*(0o)?([0-7]+)\s*$', re.I)


def parse_flags(flag):
	if (isinstance(flag, int) and not isinstance(flag, bool)):
		return flag | _O_EXTRA

	if (not isinstance(flag, str)):
		raise InvalidOptionError(f"flag must be a string, not {type(flag).__name__}")

	try:
		return FLAGS[flag] | _O_EXTRA
	except KeyError:
		raise InvalidOptionError(f"invalid flag: {flag!r}")


def parse_mode(mode):
	if (mode is None):
		return DEFAULT_MODE

	if (isinstance(mode, bool)):
		raise InvalidOptionError("mode must be an integer or an octal string, not bool")

	if (isinstance(mode, str)):
		m = _OCTAL_RE.match(mode)
		if not m:
			raise InvalidOptionError(f"invalid mode: {mode!r}")
		mode = int(m.group(2), 8)

	if (not isinstance(mode, int)):
		raise InvalidOptionError(f"mode must be an integer or an octal string, not {type(mode).__name__}")

	if not 0 <= mode <= 0o7777:
		raise InvalidOptionError(f"mode out of range: {oct(mode)}")

	return mode


def normalize_encoding(encoding):
	if (encoding is None):
		return None

	if (not isinstance(encoding, str)):
		raise InvalidOptionError(f"encoding must be a string, not {type(encoding).__name__}")

	name = encoding.strip().lower()
	if (name in ENCODINGS):
		return ENCODINGS[name]

	try:
		return codecs.lookup(name).name
	except LookupError:
		raise InvalidOptionError(f"unknown encoding: {encoding!r}")



# An odd trailing digit is dropped.
def decode_hex(text):
	out = bytearray()
	for i in range(0, len(text) - 1, 2):
		pair = text[i:i + 2]
		if (not all(c in string.hexdigits for c in pair)):
			break
		out.append(int(pair, 16))
	return bytes(out)

# Short writes are continued from where they stopped; a failed write is raised as-is.
def WriteAll(fd, data):
	view = memoryview(data)
	total = len(view)
	while view:
		written = os.write(fd, view)
		if not written:
			raise IOError(errno.EIO, f"write to descriptor {fd} made no progress")
		view = view[written:]
	logging.debug(f"Wrote {total} bytes to descriptor {fd}")
	return total


def ReadAll(fd):
	chunks = []
	while True:
		chunk = os.read(fd, BLOCK_SIZE)
		if not chunk:
			break
		chunks.append(chunk)
	return b"".join(chunks)
