import gzip
import zlib
import codecs
import tracemalloc

from apphelpers.sniff import is_gzipped, is_valid_pdf, guess_type


PDF = b'%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< >>\nendobj\n'


def test_is_gzipped():
    assert is_gzipped(gzip.compress(b'content'))
    assert is_gzipped(zlib.compress(b'content'))
    assert is_gzipped('\x1f\x8b\x08rest')
    assert not is_gzipped(b'plain text')
    assert not is_gzipped(b'')
    assert not is_gzipped(None)


def test_is_gzipped_large_stream():
    data = zlib.compress(b'\0' * (16 * 2 ** 20))
    tracemalloc.start()
    try:
        assert is_gzipped(data)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    assert peak < 2 ** 20


def test_is_gzipped_truncated_stream():
    data = zlib.compress(b'content' * 1000)
    assert not is_gzipped(data[:len(data) // 2])


def test_is_valid_pdf():
    assert is_valid_pdf(PDF)
    assert is_valid_pdf(codecs.BOM_UTF8 + PDF)
    assert is_valid_pdf(PDF.decode('latin-1'))
    assert not is_valid_pdf(b'<html></html>')
    assert not is_valid_pdf(b'')
    assert not is_valid_pdf(42)


def test_guess_type():
    assert guess_type(PDF) == 'pdf'
    assert guess_type(gzip.compress(PDF)) == 'gzip'
    assert guess_type(b'text') is None
