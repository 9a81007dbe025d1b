"""
File Write FS Operation
------------------------

Purpose:
	Implements the whole-file write operation. This FSOp replaces the contents of a file
	with the given data, creating the file if it does not exist.

Role in Architecture:
	- Identical to Append except for the default open flag ('w': create and truncate).
	- Used to seed files before appending and anywhere a fresh file is wanted.

Interface:
	- Expected input parameters:
		* target: A path, or an open file descriptor / file object.
		* payload: The data to be written (str, bytes-like or number).
		* options: mode, encoding and flag (see WriteFileOptions).
	- Returns: The number of bytes written.

TODO/FIXMEs:
	None.
"""

from ...common.WriteOp import WriteOp
from ...Options import WriteFileOptions


class Write(WriteOp):
	def __init__(this, name="Write"):
		super().__init__(name, WriteFileOptions)
