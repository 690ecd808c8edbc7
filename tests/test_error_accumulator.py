import pytest

from gptkit.error_accumulator import ErrorAccumulator, ErrorAccumulatorError


class FailingBuffer:
    def __init__(self):
        self.error = OSError("test error accumulator failed")

    def write(self, data):
        raise self.error

    def getvalue(self):
        return b""


def test_write_multiple():
    accumulator = ErrorAccumulator()
    accumulator.write(b'{"error": "test1"}')
    accumulator.write(b'{"error": "test2"}')
    assert accumulator.getvalue() == b'{"error": "test1"}{"error": "test2"}'


def test_empty_buffer():
    accumulator = ErrorAccumulator()
    assert accumulator.getvalue() == b""


def test_write_error_is_wrapped():
    buffer = FailingBuffer()
    accumulator = ErrorAccumulator(buffer)
    with pytest.raises(ErrorAccumulatorError) as info:
        accumulator.write(b"fail")
    assert info.value.__cause__ is buffer.error
    assert "error accumulator write error" in str(info.value)