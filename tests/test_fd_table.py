import pytest

from oscamp.fd_table import FdTable, File


class MockFile(File):
    def __init__(self, ident):
        self.ident = ident
        self.write_log = []

    def read(self, buf):
        buf[0] = self.ident
        return 1

    def write(self, buf):
        self.write_log.append(bytes(buf))
        return len(buf)


def test_alloc_basic():
    table = FdTable()
    assert table.alloc(MockFile(0)) == 0
    assert table.alloc(MockFile(1)) == 1


def test_get():
    table = FdTable()
    fd = table.alloc(MockFile(42))
    got = table.get(fd)
    buf = bytearray(1)
    assert got.read(buf) == 1
    assert buf[0] == 42


def test_get_invalid():
    table = FdTable()
    assert table.get(0) is None
    assert table.get(999) is None


def test_close_and_reuse():
    table = FdTable()
    table.alloc(MockFile(0))
    fd1 = table.alloc(MockFile(1))
    table.alloc(MockFile(2))

    assert table.close(fd1) is True
    assert table.get(fd1) is None

    assert table.alloc(MockFile(99)) == fd1


def test_close_invalid():
    table = FdTable()
    assert table.close(0) is False


def test_close_twice():
    table = FdTable()
    fd = table.alloc(MockFile(0))
    assert table.close(fd) is True
    assert table.close(fd) is False


def test_count():
    table = FdTable()
    assert table.count() == 0
    fd0 = table.alloc(MockFile(0))
    fd1 = table.alloc(MockFile(1))
    assert table.count() == 2
    table.close(fd0)
    assert table.count() == 1
    table.close(fd1)
    assert table.count() == 0


def test_write_through_fd():
    table = FdTable()
    file = MockFile(0)
    fd = table.alloc(file)
    assert table.get(fd).write(b"hello") == 5
    assert file.write_log == [b"hello"]


def test_file_is_abstract():
    with pytest.raises(TypeError):
        File()