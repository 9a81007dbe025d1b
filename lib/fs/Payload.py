"""
lib/fs/Payload.py

Purpose:
Classifies the data handed to a write operation as Text, Bytes or Numeric and turns it into the exact byte sequence that will be written.

Place in Architecture:
Used as the `arg.type` for the `payload` argument of write-type FSOps. The kind is decided once, when the argument is set; the bytes are produced once, in ValidateArgs, after the encoding is known.

Interface:

	__init__(value): Accepts str, bytes / bytearray / memoryview, an integral number, float, Decimal or another Payload.
	Encode(encoding): RETURNS the payload as bytes.

TODOs/FIXMEs:
None.
"""

import base64
import binascii
import numbers
import decimal

from ..Errors import InvalidPayloadError
from ..Utils import normalize_encoding, decode_hex


class Payload(object):
	TEXT = 'text'
	BYTES = 'bytes'
	NUMERIC = 'numeric'

	def __init__(this, value=None):
		if (isinstance(value, Payload)):
			this.kind = value.kind
			this.value = value.value
			return

		if (isinstance(value, str)):
			this.kind = Payload.TEXT
			this.value = value

		elif (isinstance(value, (bytes, bytearray, memoryview))):
			this.kind = Payload.BYTES
			this.value = bytes(value)

		# bool is an Integral, but True is not a number anyone means to write.
		elif (isinstance(value, (numbers.Integral, float, decimal.Decimal)) and not isinstance(value, bool)):
			this.kind = Payload.NUMERIC
			this.value = value

		else:
			raise InvalidPayloadError(f"data must be a string, a bytes-like object or a number, not {type(value).__name__}")

	def __str__(this):
		return f"<{this.kind} payload>"

	def __repr__(this):
		return f"Payload({this.kind}, {this.value!r})"

	def AsText(this):
		if (this.kind == Payload.NUMERIC):
			return str(this.value)
		return this.value

	def Encode(this, encoding='utf8'):
		if (this.kind == Payload.BYTES):
			return this.value

		text = this.AsText()
		codec = normalize_encoding(encoding) or 'utf-8'

		try:
			if (codec == 'hex'):
				return decode_hex(text)
			if (codec == 'base64'):
				return base64.b64decode(text + '=' * (-len(text) % 4))
			return text.encode(codec)
		except (ValueError, binascii.Error) as e:
			# UnicodeEncodeError is a ValueError.
			raise InvalidPayloadError(f"data cannot be encoded as {codec}: {e}") from e
