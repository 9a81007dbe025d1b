"""
lib/fs/Options.py

Purpose:
Holds the per-call settings of an FSOp (mode, encoding, flag) with their defaults, and converts them into what os.open needs.

Place in Architecture:
Used as the `arg.type` for the `options` argument of FSOps. Each FSOp picks the subclass whose defaults match it (e.g. Append uses WriteOptions with flag 'a', Write uses WriteFileOptions with flag 'w').

Interface:

	__init__(value): Accepts None, a dict, a bare encoding string or another options object.
	flags: os.O_* bits for `flag`.
	AsDict(): The resolved settings.

TODOs/FIXMEs:
None.
"""

import logging

from ..Errors import InvalidOptionError
from ..Utils import parse_flags, parse_mode, normalize_encoding, DEFAULT_MODE


class WriteOptions(object):

	# Subclasses override these.
	defaults = {
		'mode': DEFAULT_MODE,
		'encoding': 'utf8',
		'flag': 'a',
	}

	def __init__(this, value=None):
		settings = dict(this.defaults)

		if (value is None):
			pass
		elif (isinstance(value, WriteOptions)):
			settings.update(value.AsDict())
		elif (isinstance(value, str)):
			settings['encoding'] = value
		elif (isinstance(value, dict)):
			unknown = [key for key in value.keys() if key not in this.defaults]
			if (unknown):
				logging.debug(f"Ignoring unknown option(s): {', '.join(map(str, unknown))}")
			settings.update({key: val for key, val in value.items() if key in this.defaults and val is not None})
		else:
			raise InvalidOptionError(f"options must be a dict or an encoding string, not {type(value).__name__}")

		this.mode = parse_mode(settings['mode'])
		normalize_encoding(settings['encoding'])
		this.encoding = settings['encoding']
		this.flag = settings['flag']
		this.flags = parse_flags(this.flag)

	def __str__(this):
		return f"{{mode: {oct(this.mode)}, encoding: {this.encoding}, flag: {this.flag}}}"

	def __repr__(this):
		return f"{type(this).__name__}({this.AsDict()!r})"

	def AsDict(this):
		return {
			'mode': this.mode,
			'encoding': this.encoding,
			'flag': this.flag,
		}


class WriteFileOptions(WriteOptions):
	defaults = {
		'mode': DEFAULT_MODE,
		'encoding': 'utf8',
		'flag': 'w',
	}


class OpenOptions(WriteOptions):
	defaults = {
		'mode': DEFAULT_MODE,
		'encoding': None,
		'flag': 'r',
	}


class ReadOptions(WriteOptions):
	defaults = {
		'mode': DEFAULT_MODE,
		'encoding': None,
		'flag': 'r',
	}
