import zlib
import codecs


GZIP_MAGIC = b'\x1f\x8b\x08'

PDF_MAGIC = b'%PDF-'

# output of a single decompression step, thrown away right after
_CHUNK_SIZE = 64 * 1024


def _to_bytes(data):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return data.encode('latin-1')
        except UnicodeEncodeError:
            return data.encode('utf-8')
    return None


def _is_zlib_stream(data):
    decompressor = zlib.decompressobj()
    pending = data
    try:
        while not decompressor.eof:
            chunk = decompressor.decompress(pending, _CHUNK_SIZE)
            pending = decompressor.unconsumed_tail
            if not chunk and not pending:
                break
    except zlib.error:
        return False
    return decompressor.eof


def is_gzipped(data):
    data = _to_bytes(data)
    if data is None:
        return False
    if data.startswith(GZIP_MAGIC):
        return True
    return _is_zlib_stream(data)


def is_valid_pdf(data):
    data = _to_bytes(data)
    if data is None:
        return False
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    return data.startswith(PDF_MAGIC)


def guess_type(data):
    if is_valid_pdf(data):
        return 'pdf'
    if is_gzipped(data):
        return 'gzip'
    return None
