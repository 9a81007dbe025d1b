"""
lib/AppendWriter.py

Purpose:
Implements the AppendWriter: the coordinator that runs FSOps and offers each of them in three calling conventions: synchronous, completion-callback and awaitable.

Place in Architecture:
The public face of the library. It owns the worker threads; the FSOps own the I/O. Every public method is a thin adapter over one FSOp, so the three conventions cannot drift apart.

Interface:

	AppendWriter(name, max_workers): Creates a writer. The thread pool is started on first use.
	append / append_async / append_sync(target, data, options): Append data to a file.
	write / write_async / write_sync(target, data, options): Replace the content of a file.
	open / open_async / open_sync(path, flag, mode): Open a file; the descriptor belongs to the caller.
	close / close_async / close_sync(fd): Close a descriptor.
	read / read_async / read_sync(target, encoding): Read a whole file.
	shutdown(wait=True): Stop the worker threads. Afterwards the callback form raises RuntimeError synchronously (there is no thread left to deliver it on), the awaitable form raises it when awaited, and the sync form keeps working.

	Module level: append_file, append_file_async, append_file_sync, etc., bound to a shared default writer.

TODOs/FIXMEs:
None.
"""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from .Errors import InvalidCallbackError
from .fs.fsop.file.Append import Append
from .fs.fsop.file.Write import Write
from .fs.fsop.file.Open import Open
from .fs.fsop.file.Close import Close
from .fs.fsop.file.Read import Read

__all__ = [
	'AppendWriter',
	'GetDefaultWriter',
	'append_file', 'append_file_async', 'append_file_sync',
	'write_file', 'write_file_async', 'write_file_sync',
	'open_file', 'open_file_async', 'open_file_sync',
	'close_file', 'close_file_async', 'close_file_sync',
	'read_file', 'read_file_async', 'read_file_sync',
]


# Callbacks are called with (error,) or, for FSOps that produce a value, (None, value).
# They are called exactly once, on a worker thread, after all I/O (including any internal close) has finished.
#
# Calling conventions:
#   writer.append(path, data, callback)            # options may be skipped.
#   writer.append(path, data, options, callback)
#   await writer.append_async(path, data, options)
#   writer.append_sync(path, data, options)
#
# NOTE: Concurrent appends to the same path are not serialized here. O_APPEND makes each write land at the end of file on POSIX, but that is a property of the platform.
class AppendWriter(object):
	def __init__(this, name="AppendWriter", max_workers=None):
		this.name = name
		this.max_workers = max_workers

		this.lock = threading.Lock()
		this.pool = None
		this.closed = False

	def __enter__(this):
		return this

	def __exit__(this, exc_type, exc_value, traceback):
		this.shutdown()
		return False

	def GetPool(this):
		with this.lock:
			if this.closed:
				raise RuntimeError(f"{this.name} has been shut down")
			if this.pool is None:
				this.pool = ThreadPoolExecutor(max_workers=this.max_workers, thread_name_prefix=this.name)
				logging.debug(f"{this.name} started its worker pool (max_workers={this.max_workers})")
			return this.pool

	def shutdown(this, wait=True):
		with this.lock:
			this.closed = True
			pool = this.pool
			this.pool = None
		if pool is not None:
			pool.shutdown(wait=wait)
			logging.debug(f"{this.name} shut down its worker pool")

	# Run a fresh FSOp on the current thread.
	def Execute(this, fsop, **kwargs):
		return fsop()(**kwargs)

	def Submit(this, fsop, **kwargs):
		return this.GetPool().submit(this.Execute, fsop, **kwargs)

	# Validate the callback before anything else. Apart from a shut down pool, this is the only error raised synchronously by callback-style calls.
	def Callback(this, fsop, callback, returnsValue=False, **kwargs):
		if (not callable(callback)):
			raise InvalidCallbackError(f"Callback must be a function. Received {callback!r}")

		def Deliver(future):
			error = future.exception()
			if (error is not None):
				callback(error)
			elif (returnsValue):
				callback(None, future.result())
			else:
				callback(None)

		this.Submit(fsop, **kwargs).add_done_callback(Deliver)

	async def Await(this, fsop, **kwargs):
		return await asyncio.wrap_future(this.Submit(fsop, **kwargs))

	# Optional arguments may be skipped: append(target, data, callback) is append(target, data, None, callback).
	@staticmethod
	def ShiftCallback(options, callback):
		if (callback is None and callable(options)):
			return None, options
		return options, callback

	# -- Append

	def append(this, target, data, options=None, callback=None):
		options, callback = this.ShiftCallback(options, callback)
		this.Callback(Append, callback, target=target, payload=data, options=options)

	async def append_async(this, target, data, options=None):
		await this.Await(Append, target=target, payload=data, options=options)

	def append_sync(this, target, data, options=None):
		this.Execute(Append, target=target, payload=data, options=options)

	# -- Write

	def write(this, target, data, options=None, callback=None):
		options, callback = this.ShiftCallback(options, callback)
		this.Callback(Write, callback, target=target, payload=data, options=options)

	async def write_async(this, target, data, options=None):
		await this.Await(Write, target=target, payload=data, options=options)

	def write_sync(this, target, data, options=None):
		this.Execute(Write, target=target, payload=data, options=options)

	# -- Open / Close

	def open(this, path, flag='r', mode=None, callback=None):
		if (callback is None and callable(mode)):
			mode, callback = None, mode
		if (callback is None and callable(flag)):
			flag, callback = 'r', flag
		this.Callback(Open, callback, True, target=path, options={'flag': flag, 'mode': mode})

	async def open_async(this, path, flag='r', mode=None):
		return await this.Await(Open, target=path, options={'flag': flag, 'mode': mode})

	def open_sync(this, path, flag='r', mode=None):
		return this.Execute(Open, target=path, options={'flag': flag, 'mode': mode})

	def close(this, fd, callback=None):
		this.Callback(Close, callback, target=fd)

	async def close_async(this, fd):
		await this.Await(Close, target=fd)

	def close_sync(this, fd):
		this.Execute(Close, target=fd)

	# -- Read

	def read(this, target, encoding=None, callback=None):
		if (callback is None and callable(encoding)):
			encoding, callback = None, encoding
		this.Callback(Read, callback, True, target=target, options={'encoding': encoding})

	async def read_async(this, target, encoding=None):
		return await this.Await(Read, target=target, options={'encoding': encoding})

	def read_sync(this, target, encoding=None):
		return this.Execute(Read, target=target, options={'encoding': encoding})


_default_writer = None
_default_writer_lock = threading.Lock()


def GetDefaultWriter():
	global _default_writer
	with _default_writer_lock:
		if _default_writer is None:
			_default_writer = AppendWriter("appendfs")
		return _default_writer


def append_file(target, data, options=None, callback=None):
	GetDefaultWriter().append(target, data, options, callback)

async def append_file_async(target, data, options=None):
	await GetDefaultWriter().append_async(target, data, options)

def append_file_sync(target, data, options=None):
	GetDefaultWriter().append_sync(target, data, options)


def write_file(target, data, options=None, callback=None):
	GetDefaultWriter().write(target, data, options, callback)

async def write_file_async(target, data, options=None):
	await GetDefaultWriter().write_async(target, data, options)

def write_file_sync(target, data, options=None):
	GetDefaultWriter().write_sync(target, data, options)


def open_file(path, flag='r', mode=None, callback=None):
	GetDefaultWriter().open(path, flag, mode, callback)

async def open_file_async(path, flag='r', mode=None):
	return await GetDefaultWriter().open_async(path, flag, mode)

def open_file_sync(path, flag='r', mode=None):
	return GetDefaultWriter().open_sync(path, flag, mode)


def close_file(fd, callback=None):
	GetDefaultWriter().close(fd, callback)

async def close_file_async(fd):
	await GetDefaultWriter().close_async(fd)

def close_file_sync(fd):
	GetDefaultWriter().close_sync(fd)


def read_file(target, encoding=None, callback=None):
	GetDefaultWriter().read(target, encoding, callback)

async def read_file_async(target, encoding=None):
	return await GetDefaultWriter().read_async(target, encoding)

def read_file_sync(target, encoding=None):
	return GetDefaultWriter().read_sync(target, encoding)
