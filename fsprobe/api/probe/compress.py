import io
from collections.abc import Iterable

from .RunLengthCompressor import RunLengthCompressor


def compress(tokens: Iterable[str]) -> str:
    """Run-length compress ``tokens`` into a single report string."""
    buffer = io.StringIO()
    compressor = RunLengthCompressor(buffer)
    for token in tokens:
        compressor.push(token)
    compressor.flush()
    return buffer.getvalue()
