"""
lib/fs/Target.py

Purpose:
Represents what an FSOp operates on: either a path, which the FSOp opens and closes itself, or an already-open handle, which belongs to the caller.

Place in Architecture:
Used as the `arg.type` for every FSOp's `target` argument, so raw values are classified once, when the FSOp's arguments are set.

Interface:

	__init__(value): Accepts a str / bytes / os.PathLike path, an int descriptor, an object with fileno(), or another Target.
	IsPath() / IsHandle(): Which kind *this is.
	GetDescriptor(): The raw descriptor of a handle target.
	Acquire(options): RETURNS a context manager yielding an open handle (owned for paths, borrowed for handles).

TODOs/FIXMEs:
None.
"""

import os

from ..Errors import InvalidTargetError
from .Handle import OwnedHandle, BorrowedHandle


class Target(object):
	PATH = 'path'
	HANDLE = 'handle'

	def __init__(this, value=None):
		if (isinstance(value, Target)):
			this.kind = value.kind
			this.value = value.value
			return

		if (isinstance(value, bool)):
			raise InvalidTargetError("target must be a path or a file descriptor, not bool")

		if (isinstance(value, int)):
			if (value < 0):
				raise InvalidTargetError(f"invalid file descriptor: {value}")
			this.kind = Target.HANDLE
			this.value = value
			return

		if (isinstance(value, (str, bytes, os.PathLike))):
			path = os.fspath(value)
			nul = b"\x00" if isinstance(path, bytes) else "\x00"
			if (nul in path):
				raise InvalidTargetError(f"path contains a null byte: {path!r}")
			this.kind = Target.PATH
			this.value = path
			return

		if (callable(getattr(value, 'fileno', None))):
			this.kind = Target.HANDLE
			this.value = value
			return

		raise InvalidTargetError(f"target must be a path or a file descriptor, not {type(value).__name__}")

	def __str__(this):
		if (this.IsPath()):
			return os.fsdecode(this.value)
		if (isinstance(this.value, int)):
			return f"fd {this.value}"
		return f"{type(this.value).__name__} handle"

	def __repr__(this):
		return f"Target({this.kind}, {this.value!r})"

	def IsPath(this):
		return this.kind == Target.PATH

	def IsHandle(this):
		return this.kind == Target.HANDLE

	@property
	def path(this):
		if (not this.IsPath()):
			raise InvalidTargetError(f"{this} is not a path")
		return this.value

	def GetDescriptor(this):
		if (not this.IsHandle()):
			raise InvalidTargetError(f"{this} is not a file descriptor")
		if (isinstance(this.value, int)):
			return this.value
		return this.value.fileno()

	# Paths are opened (and later closed) with the given options.
	# Handles are used as they are and never closed.
	def Acquire(this, options):
		if (this.IsPath()):
			return OwnedHandle(this.value, options.flags, options.mode)
		return BorrowedHandle(this)
