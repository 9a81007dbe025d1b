"""
lib/fs/fsop/file/Close.py

Purpose:
Closes a file handle that was opened by Open (or by the caller some other way).

Place in Architecture:
Releases caller-owned handles. Handles opened internally by Append / Write / Read are released by OwnedHandle, not by this FSOp.

Interface:

	Mapped args: target (an int descriptor or an object with close()).

TODOs/FIXMEs:
None explicitly noted.
"""

import os
import logging

from ...common.FSOp import FSOp
from ...Target import Target
from ....Errors import InvalidTargetError


class Close(FSOp):
	def __init__(this, name="Close"):
		super().__init__(name)

		this.arg.kw.required.append('target')
		this.arg.mapping.append('target')
		this.arg.type['target'] = Target

	def ValidateArgs(this):
		super().ValidateArgs()

		if (not this.target.IsHandle()):
			raise InvalidTargetError(f"{this.name} needs a file descriptor, got {this.target}")

	def Function(this):
		f = this.target.value
		if (isinstance(f, int)):
			os.close(f)
		else:
			f.close()
		logging.debug(f"Closed {this.target}")
