"""
lib/Errors.py

Purpose:
Defines the exceptions raised by the library itself. Filesystem failures (missing paths, permissions, directories, failed writes) are not wrapped; they surface as the builtin OSError subclasses raised by the os module.

Place in Architecture:
Imported by every FSOp, the data model classes and the AppendWriter.

Interface:

	AppendFSError: base class for library-raised errors. Carries a string `code` naming the failure.
	UsageError: caller-fixable errors; never retried.
	InvalidCallbackError, InvalidPayloadError, InvalidOptionError, InvalidTargetError: the UsageError kinds.
	CloseError: an OSError raised when closing an internally-opened descriptor fails.

TODOs/FIXMEs:
None.
"""


class AppendFSError(Exception):
	code = "ERR_APPENDFS"


# UsageErrors are raised before any I/O happens.
class UsageError(AppendFSError, TypeError):
	code = "ERR_INVALID_ARG"


class InvalidCallbackError(UsageError):
	code = "ERR_INVALID_CALLBACK"


class InvalidPayloadError(UsageError):
	code = "ERR_INVALID_ARG_TYPE"


class InvalidOptionError(UsageError, ValueError):
	code = "ERR_INVALID_OPT_VALUE"


class InvalidTargetError(UsageError, ValueError):
	code = "ERR_INVALID_ARG_VALUE"


# Raised when os.close fails on a descriptor *this library opened.
# If the write before it also failed, the write error is raised instead and this is attached to it as `close_error`.
class CloseError(OSError):
	code = "ERR_CLOSE"
