"""
lib/fs/fsop/file/Open.py

Purpose:
Opens a file and hands the raw descriptor to the caller.

Place in Architecture:
The only FSOp whose descriptor outlives the call. Whoever receives it owns it and must pass it to Close.

Interface:

	Mapped args: target (a path), options (flag, default 'r'; mode, default 0o666).
	RETURNS the new file descriptor.

TODOs/FIXMEs:
None.
"""

import os
import logging

from ...common.FSOp import FSOp
from ...Target import Target
from ...Options import OpenOptions
from ....Errors import InvalidTargetError


class Open(FSOp):
	def __init__(this, name="Open"):
		super().__init__(name)

		this.arg.kw.required.append('target')
		this.arg.kw.optional['options'] = None

		this.arg.mapping.append('target')
		this.arg.mapping.append('options')

		this.arg.type['target'] = Target
		this.arg.type['options'] = OpenOptions

	def ValidateArgs(this):
		super().ValidateArgs()

		if (not this.target.IsPath()):
			raise InvalidTargetError(f"{this.name} needs a path, got {this.target}")

	def Function(this):
		fd = os.open(this.target.path, this.options.flags, this.options.mode)
		logging.debug(f"Opened {this.target} with flag '{this.options.flag}' as descriptor {fd}")
		return fd
