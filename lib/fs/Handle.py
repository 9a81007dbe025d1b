"""
lib/fs/Handle.py

Purpose:
Scoped ownership of raw file descriptors. An OwnedHandle opens a path on entry and always closes it on exit; a BorrowedHandle exposes a caller's descriptor and leaves it open.

Place in Architecture:
Returned by Target.Acquire() and used with `with` by every FSOp that touches file data, so the release of an internally opened descriptor happens in exactly one place.

Interface:

	OwnedHandle(path, flags, mode): open() / close() / context manager. `fd` is the open descriptor.
	BorrowedHandle(target): context manager. `fd` is the caller's descriptor.

TODOs/FIXMEs:
None.
"""

import os
import errno
import logging

from ..Errors import CloseError


class OwnedHandle(object):
	"""
	A descriptor *this opened and must close.
	If the body of the `with` block raised, that error wins; a failing close is attached to it as `close_error`.
	If only the close failed, a CloseError is raised.
	"""

	def __init__(this, path, flags, mode):
		this.path = path
		this.flags = flags
		this.mode = mode
		this.fd = None

	def open(this):
		if this.fd is not None:
			raise IOError(errno.EBUSY, "Handle is already open", this.path)
		this.fd = os.open(this.path, this.flags, this.mode)
		logging.debug(f"Opened {this.path!r} as descriptor {this.fd} (flags={oct(this.flags)}, mode={oct(this.mode)})")
		return this.fd

	def close(this):
		if this.fd is None:
			raise IOError(errno.EBADF, "Operation on a closed file", this.path)
		fd = this.fd
		this.fd = None
		try:
			os.close(fd)
		except OSError as e:
			raise CloseError(e.errno, f"Could not close descriptor {fd}: {e.strerror}", this.path) from e
		logging.debug(f"Closed descriptor {fd} ({this.path!r})")

	def __enter__(this):
		this.open()
		return this

	def __exit__(this, exc_type, exc_value, traceback):
		if exc_value is None:
			this.close()
			return False

		try:
			this.close()
		except CloseError as closeError:
			exc_value.close_error = closeError
		return False


class BorrowedHandle(object):
	"""
	A caller's descriptor. Buffered file objects are flushed first so raw writes land after their pending data.
	"""

	def __init__(this, target):
		this.target = target
		this.fd = None

	def __enter__(this):
		flush = getattr(this.target.value, 'flush', None)
		if callable(flush):
			flush()
		this.fd = this.target.GetDescriptor()
		return this

	def __exit__(this, exc_type, exc_value, traceback):
		this.fd = None
		return False
