import io

from pbkdf2_mod.console import is_redirected, write_text


class FakeConsole(io.StringIO):
    def isatty(self):
        return True


def test_console_gets_text():
    stream = FakeConsole()
    assert not is_redirected(stream)
    write_text(stream, "Duration: 5 ms\n", "utf-16-le")
    assert stream.getvalue() == "Duration: 5 ms\n"


def test_redirected_stream_gets_encoded_bytes():
    raw = io.BytesIO()
    stream = io.TextIOWrapper(raw, encoding="utf-8")
    assert is_redirected(stream)
    write_text(stream, "Password: 'Mädchen'\n", "utf-16-le")
    assert raw.getvalue() == "Password: 'Mädchen'\n".encode("utf-16-le")


def test_redirected_stream_replaces_unencodable():
    raw = io.BytesIO()
    stream = io.TextIOWrapper(raw, encoding="utf-8")
    write_text(stream, "Ω\n", "ascii")
    assert raw.getvalue() == b"?\n"


def test_plain_text_stream_without_buffer():
    stream = io.StringIO()
    assert is_redirected(stream)
    write_text(stream, "abc")
    assert stream.getvalue() == "abc"


def test_closed_stream_counts_as_redirected():
    stream = io.StringIO()
    stream.close()
    assert is_redirected(stream)
