"""
lib/fs/common/WriteOp.py

Purpose:
The shared body of every FSOp that puts a payload into a file (Append, Write). Normalizes the payload, opens the target if it is a path, writes all bytes and releases what it opened.

Place in Architecture:
Sits between FSOp and the concrete write operations. Children only choose their name and their options type (which carries the default open flag).

Interface:

	Mapped args: target, payload, options (optional).
	Function(): Writes the payload. RETURNS the number of bytes written.

TODOs/FIXMEs:
None.
"""

import logging

from .FSOp import FSOp
from ..Target import Target
from ..Payload import Payload
from ..Options import WriteOptions
from ...Utils import WriteAll


class WriteOp(FSOp):
	def __init__(this, name="WriteOp", options=WriteOptions):
		super().__init__(name)

		this.arg.kw.required.append('target')
		this.arg.kw.required.append('payload')
		this.arg.kw.optional['options'] = None

		this.arg.mapping.append('target')
		this.arg.mapping.append('payload')
		this.arg.mapping.append('options')

		this.arg.type['target'] = Target
		this.arg.type['payload'] = Payload
		this.arg.type['options'] = options

	def ValidateArgs(this):
		super().ValidateArgs()

		# Resolve the payload to bytes exactly once.
		this.data = this.payload.Encode(this.options.encoding)

	def Function(this):
		with this.target.Acquire(this.options) as handle:
			written = WriteAll(handle.fd, this.data)

		logging.debug(f"{this.name}: {written} bytes to {this.target}")
		return written
