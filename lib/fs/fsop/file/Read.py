"""
lib/fs/fsop/file/Read.py

Purpose:
Reads the whole content of a file.

Place in Architecture:
Uses the same Target / OwnedHandle machinery as the write FSOps: paths are opened read-only and always closed; handles are read from their current position to EOF and left open.

Interface:

	Mapped args: target, options (encoding, default None; flag, default 'r').
	RETURNS bytes, or str when an encoding is given.

TODOs/FIXMEs:
None.
"""

import logging

from ...common.FSOp import FSOp
from ...Target import Target
from ...Options import ReadOptions
from ....Utils import ReadAll, normalize_encoding
from ....Errors import InvalidOptionError


class Read(FSOp):
	def __init__(this, name="Read"):
		super().__init__(name)

		this.arg.kw.required.append('target')
		this.arg.kw.optional['options'] = None

		this.arg.mapping.append('target')
		this.arg.mapping.append('options')

		this.arg.type['target'] = Target
		this.arg.type['options'] = ReadOptions

	def ValidateArgs(this):
		super().ValidateArgs()

		this.codec = normalize_encoding(this.options.encoding)
		if (this.codec in ('hex', 'base64')):
			raise InvalidOptionError(f"{this.name} cannot decode as {this.codec}")

	def Function(this):
		with this.target.Acquire(this.options) as handle:
			data = ReadAll(handle.fd)

		logging.debug(f"{this.name}: {len(data)} bytes from {this.target}")

		if (this.codec is None):
			return data
		return data.decode(this.codec)
