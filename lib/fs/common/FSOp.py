"""
lib/fs/common/FSOp.py

Purpose:
Defines the base class for File System Operations (FSOps). Each FSOp represents a single operation (e.g. open, append, close).

Place in Architecture:
Serves as the foundation for all FS operations. All other FSOp modules inherit from this. The AppendWriter constructs a fresh FSOp for every call and runs it on the caller's thread (sync) or on its thread pool (callback, awaitable).

Interface:

	Inherits from eons.Functor.
	Call with the FSOp's mapped args, e.g. Append()(target, payload, options). RETURNS whatever Function returns.

TODOs/FIXMEs:
None.
"""


import eons

# An FSOp, or File System Operation, is a Functor which performs a single operation on a file system.
# For example, opening a file, appending to a file, closing a file, etc.
# FSOp is a base class for all file system operations.
# All FSOps should be:
# - Stateless: They should not store any state between calls. Construct a new one for every call.
# - Asynchronous: They will be given their own thread to run in by the AppendWriter.
# - Scalable: Multiple FSOps should be able to run in parallel without interfering with each other.
#
# Arguments are only taken from the call itself. Every argument should have an arg.type, so that user data is never coerced by eons (e.g. "220" -> 220).
class FSOp(eons.Functor):
	def __init__(this, name=eons.INVALID_NAME()):
		super().__init__(name)

		# Functor tracking is a process-wide stack; FSOps run concurrently.
		this.feature.track = False
		this.feature.sequential = False

		# Return Function's value directly and raise on missing args instead of returning a partial call.
		this.feature.autoReturn = False
		this.feature.rollback = False

		this.fetch.use = ['args']

	# FSOps have no precursor and no eons Executor.
	def PopulatePrecursor(this):
		this.executor = this.kwargs.pop('executor', None)
		this.precursor = None
