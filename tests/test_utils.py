import pytest

from utils import FilenameError, decode_filename, sanitize_filename


@pytest.mark.parametrize("name", ["report.pdf", "café.txt", "测试文件.txt", "ÃÃ.bin", "MenÃ¼.txt"])
def test_decode_keeps_proper_text(name):
    assert decode_filename(name) == name


def test_decode_never_reinterprets_text():
    assert decode_filename("æµ\x8bè¯\x95.txt") == "æµ\x8bè¯\x95.txt"


def test_decode_bytes_as_utf8():
    assert decode_filename("测试.txt".encode("utf-8")) == "测试.txt"


def test_decode_rejects_invalid_utf8_bytes():
    with pytest.raises(FilenameError):
        decode_filename(b"\xff\xfe.txt")


def test_decode_rejects_replacement_character():
    with pytest.raises(FilenameError):
        decode_filename("broken\ufffd.txt")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a.txt", "a.txt"),
        ("  spaced.txt  ", "spaced.txt"),
        ("../../etc/passwd", "passwd"),
        ("C:\\Users\\me\\photo.jpg", "photo.jpg"),
        ("文档/报告.docx", "报告.docx"),
        (".bashrc", ".bashrc"),
    ],
)
def test_sanitize(raw, expected):
    assert sanitize_filename(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", ".", "..", "dir/", "tab\there", "nul\x00.txt"])
def test_sanitize_rejects(raw):
    with pytest.raises(FilenameError):
        sanitize_filename(raw)


def test_sanitize_rejects_overlong_names():
    sanitize_filename("文" * 85)
    with pytest.raises(FilenameError):
        sanitize_filename("文" * 86)
