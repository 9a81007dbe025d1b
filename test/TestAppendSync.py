import os
import errno
import decimal
import fractions
import pytest

from StandardTestFixture import StandardTestFixture, CURRENT_FILE_DATA, NUMBER, TEXT, TEXT_LENGTH

from libappendfs import Append, InvalidPayloadError, InvalidOptionError, InvalidTargetError, UsageError


class TestAppendSync(StandardTestFixture):

	def test_creates_empty_file_and_appends(this):
		path = this.Path('append.txt')
		this.writer.append_sync(path, TEXT)
		this.assert_equal(this.Length(path), TEXT_LENGTH)

	def test_appends_to_non_empty_file(this):
		path = this.Seed('append-non-empty.txt')
		this.writer.append_sync(path, TEXT)
		this.assert_equal(this.Length(path), TEXT_LENGTH + len(CURRENT_FILE_DATA))

		with open(path, 'rb') as f:
			this.assert_equal(f.read(), (CURRENT_FILE_DATA + TEXT).encode('utf-8'))

	def test_accepts_bytes(this):
		path = this.Seed('append-buffer.txt')
		buf = TEXT.encode('utf-8')
		this.writer.append_sync(path, buf)
		this.assert_equal(this.Length(path), len(buf) + len(CURRENT_FILE_DATA))

	def test_accepts_bytearray_and_memoryview(this):
		path = this.Seed('append-bytearray.txt')
		this.writer.append_sync(path, bytearray(b'\x00\x01\x02'))
		this.writer.append_sync(path, memoryview(b'\xff\xfe'))
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'ABCD\x00\x01\x02\xff\xfe')

	def test_accepts_numbers_on_new_file(this):
		path = this.Path('append-number-new.txt')
		this.writer.append_sync(path, NUMBER)
		this.assert_equal(this.Length(path), 3)

	def test_accepts_numbers(this):
		path = this.Seed('append-numbers.txt')
		this.writer.append_sync(path, NUMBER, {'mode': 0o600})
		this.assert_equal(this.Length(path), len(str(NUMBER)) + len(CURRENT_FILE_DATA))

	def test_number_is_written_as_its_decimal_string(this):
		path = this.Path('append-decimal.txt')
		this.writer.append_sync(path, 1.5)
		this.writer.append_sync(path, decimal.Decimal('10.25'))
		this.writer.append_sync(path, -7)
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'1.510.25-7')

	def test_string_payload_is_not_coerced(this):
		path = this.Path('append-literal.txt')
		this.writer.append_sync(path, 'true')
		this.writer.append_sync(path, '220')
		this.writer.append_sync(path, '{path}')
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'true220{path}')

	def test_empty_payload_creates_file(this):
		path = this.Path('append-empty.txt')
		this.writer.append_sync(path, '')
		assert os.path.isfile(path)
		this.assert_equal(this.Length(path), 0)

	@pytest.mark.skipif(os.name == 'nt', reason="windows permissions aren't unix")
	def test_mode_applies_on_creation(this):
		path = this.Path('append-mode-new.txt')
		umask = os.umask(0)
		try:
			this.writer.append_sync(path, NUMBER, {'mode': 0o600})
		finally:
			os.umask(umask)
		this.assert_equal(this.Mode(path), 0o600)
		this.assert_equal(this.Length(path), 3)

	@pytest.mark.skipif(os.name == 'nt', reason="windows permissions aren't unix")
	def test_mode_does_not_change_existing_file(this):
		path = this.Seed('append-mode-existing.txt')
		os.chmod(path, 0o644)
		this.writer.append_sync(path, NUMBER, {'mode': 0o600})
		this.assert_equal(this.Mode(path), 0o644)

	@pytest.mark.skipif(os.name == 'nt', reason="windows permissions aren't unix")
	def test_mode_as_octal_string(this):
		path = this.Path('append-mode-string.txt')
		this.writer.append_sync(path, 'x', {'mode': '0o640'})
		this.assert_equal(os.stat(path).st_mode & 0o700, 0o600)

	def test_accepts_file_descriptors(this):
		path = this.Seed('append-descriptors.txt')
		fd = os.open(path, os.O_RDWR | os.O_APPEND)
		try:
			this.writer.append_sync(fd, TEXT)

			# The descriptor belongs to us and is still open.
			os.fstat(fd)
		finally:
			os.close(fd)
		this.assert_equal(this.Length(path), TEXT_LENGTH + len(CURRENT_FILE_DATA))

	def test_accepts_file_objects_and_keeps_their_order(this):
		path = this.Seed('append-file-object.txt')
		with open(path, 'ab') as f:
			f.write(b'xy')
			this.writer.append_sync(f, 'z')
			assert not f.closed
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'ABCDxyz')

	def test_accepts_bytes_and_pathlike_paths(this):
		import pathlib
		path = this.Path('append-pathlike.txt')
		this.writer.append_sync(pathlib.Path(path), 'ab')
		this.writer.append_sync(os.fsencode(path), 'cd')
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'abcd')

	def test_unknown_options_are_ignored(this):
		path = this.Seed('append-extra-options.txt')
		this.writer.append_sync(path, NUMBER, {'flush': True, 'signal': None, 'encoding': 'utf8'})
		this.assert_equal(this.Length(path), len(CURRENT_FILE_DATA) + 3)

	def test_encoding_shorthand(this):
		path = this.Path('append-hex.txt')
		this.writer.append_sync(path, '414243', 'hex')
		this.writer.append_sync(path, 'REVG', {'encoding': 'base64'})
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'ABCDEF')

	def test_hex_with_bad_digits_appends_the_valid_prefix(this):
		path = this.Seed('append-hex-partial.txt')
		this.writer.append_sync(path, '4546x47', 'hex')
		this.writer.append_sync(path, '474', 'hex')
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'ABCDEFG')

	def test_text_encodings(this):
		path = this.Path('append-encodings.txt')
		this.writer.append_sync(path, 'ab', 'ucs2')
		this.assert_equal(this.Length(path), 4)
		this.writer.append_sync(path, 'é', 'latin1')
		this.assert_equal(this.Length(path), 5)

	def test_flag_option(this):
		path = this.Seed('append-flag-w.txt')
		this.writer.append_sync(path, 'xyz', {'flag': 'w'})
		with open(path, 'rb') as f:
			this.assert_equal(f.read(), b'xyz')

	def test_exclusive_flag_on_existing_file(this):
		path = this.Seed('append-flag-ax.txt')
		this.assert_raises(FileExistsError, this.writer.append_sync, path, 'x', {'flag': 'ax'})
		this.assert_equal(this.Length(path), len(CURRENT_FILE_DATA))

	def test_missing_directory(this):
		path = this.Path(os.path.join('missing', 'append.txt'))
		this.assert_raises(FileNotFoundError, this.writer.append_sync, path, TEXT)

	@pytest.mark.skipif(os.name == 'nt', reason="EISDIR is posix")
	def test_directory_target(this):
		this.assert_raises(IsADirectoryError, this.writer.append_sync, this.tempdir, TEXT)

	def test_read_only_descriptor(this):
		path = this.Seed('append-read-only.txt')
		fd = os.open(path, os.O_RDONLY)
		try:
			with pytest.raises(OSError) as e:
				this.writer.append_sync(fd, TEXT)
			this.assert_equal(e.value.errno, errno.EBADF)
		finally:
			os.close(fd)
		this.assert_equal(this.Length(path), len(CURRENT_FILE_DATA))

	@pytest.mark.parametrize('payload', [None, True, object(), 1 + 2j, fractions.Fraction(1, 3), ['a']])
	def test_invalid_payload(this, payload):
		path = this.Path('append-invalid-payload.txt')
		this.assert_raises(InvalidPayloadError, this.writer.append_sync, path, payload)
		assert not os.path.exists(path)

	@pytest.mark.parametrize('options', [
		{'flag': 'q'},
		{'flag': 3.5},
		{'mode': 'rwx'},
		{'mode': 0o10000},
		{'mode': True},
		{'encoding': 'no-such-encoding'},
		42,
	])
	def test_invalid_options(this, options):
		path = this.Path('append-invalid-options.txt')
		this.assert_raises(InvalidOptionError, this.writer.append_sync, path, 'x', options)
		assert not os.path.exists(path)

	@pytest.mark.parametrize('target', [True, -1, 3.5, 'bad\x00path', None])
	def test_invalid_target(this, target):
		this.assert_raises(InvalidTargetError, this.writer.append_sync, target, 'x')

	def test_unencodable_text(this):
		path = this.Path('append-unencodable.txt')
		this.assert_raises(InvalidPayloadError, this.writer.append_sync, path, TEXT, 'ascii')

	def test_usage_errors_share_a_base(this):
		assert issubclass(InvalidPayloadError, UsageError)
		assert issubclass(InvalidOptionError, UsageError)
		assert issubclass(InvalidTargetError, UsageError)
		assert issubclass(InvalidPayloadError, TypeError)

	def test_fsop_directly(this):
		path = this.Path('append-fsop.txt')
		written = Append()(path, TEXT)
		this.assert_equal(written, TEXT_LENGTH)
		written = Append()(target=path, payload=NUMBER, options={'encoding': 'utf8'})
		this.assert_equal(written, 3)
		this.assert_equal(this.Length(path), TEXT_LENGTH + 3)
