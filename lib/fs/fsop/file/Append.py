"""
File Append FS Operation
------------------------

Purpose:
	Implements the POSIX append operation for files. This FSOp appends data to the end
	of a file, creating the file if it does not exist.

Role in Architecture:
	- Opens path targets with the append-create flag ('a' unless options say otherwise),
	  so every write lands at the current end of file.
	- Writes to handle targets as they are; the caller's open flags decide the position.
	- Backs AppendWriter.append, append_async and append_sync.

Interface:
	- Expected input parameters:
		* target: A path, or an open file descriptor / file object.
		* payload: The data to be appended (str, bytes-like or number).
		* options: mode, encoding and flag (see WriteOptions).
	- Returns: The number of bytes appended.
	- Raises the OSError from open / write unchanged, CloseError if only the close failed.

TODO/FIXMEs:
	None.
"""

from ...common.WriteOp import WriteOp
from ...Options import WriteOptions


class Append(WriteOp):
	def __init__(this, name="Append"):
		super().__init__(name, WriteOptions)
