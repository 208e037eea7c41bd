import os
import subprocess
import sys
import time

import pytest

from fluentkit import tools
from fluentkit.color import Color


def test_uuid_is_32_hex_and_unique():
    first, second = tools.uuid(), tools.uuid()
    assert len(first) == 32
    assert all(c in "0123456789abcdef" for c in first)
    assert first != second


def test_md5_known_vector():
    assert tools.md5("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_sha256_known_vector():
    assert tools.sha256("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_base64_round_trip_unicode():
    text = "héllo wörld ✓"
    assert tools.from_base64(tools.to_base64(text)) == text


def test_from_base64_tolerates_missing_padding_and_whitespace():
    encoded = tools.to_base64("hello")
    stripped = encoded.rstrip("=")
    assert tools.from_base64(stripped) == "hello"
    assert tools.from_base64(stripped[:3] + "\n " + stripped[3:]) == "hello"


def test_read_file_round_trip(tmp_path):
    target = tmp_path / "note.txt"
    target.write_text("line one\nline two", encoding="utf-8")
    assert tools.read_file(str(target)) == "line one\nline two"


def test_read_file_missing_returns_empty(tmp_path):
    assert tools.read_file(str(tmp_path / "missing.txt")) == ""


def test_remove_file(tmp_path):
    target = tmp_path / "gone.txt"
    target.write_text("x")
    assert tools.remove_file(str(target)) is True
    assert not target.exists()
    assert tools.remove_file(str(target)) is False


def test_remove_dir(tmp_path):
    root = tmp_path / "tree"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "f.txt").write_text("x")
    assert tools.remove_dir(str(root)) is True
    assert not root.exists()
    assert tools.remove_dir(str(root)) is True


def test_to_local_path_decodes():
    assert tools.to_local_path("file:///tmp/a%20b.txt") == "/tmp/a b.txt"


def test_to_local_path_non_file_is_empty():
    assert tools.to_local_path("https://example.com/x") == ""


def test_file_url_round_trip():
    path = "/tmp/some dir/a#b%c.txt"
    url = tools.get_url_by_file_path(path)
    assert url.startswith("file:///")
    assert tools.to_local_path(url) == path


def test_get_file_name_by_url():
    url = tools.get_url_by_file_path("/x/y/report.txt")
    assert tools.get_file_name_by_url(url) == "report.txt"


def test_application_dir_is_absolute():
    path = tools.get_application_dir_path()
    assert path == os.path.abspath(path)


def test_html_to_plain_text_blocks():
    html = "<p>Hello   <b>world</b></p><p>Second</p>"
    assert tools.html_to_plain_text(html) == "Hello world\nSecond"


def test_html_to_plain_text_drops_scripts_and_decodes_entities():
    result = tools.html_to_plain_text("<script>alert(1)</script><p>a &amp; b</p>")
    assert "alert" not in result
    assert "a & b" in result


def test_current_timestamp_in_range():
    before = int(time.time() * 1000) - 1
    value = tools.current_timestamp()
    after = int(time.time() * 1000) + 1
    assert before <= value <= after


def test_platform_flags(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert tools.is_linux() is True
    assert tools.is_win() is False
    assert tools.is_macos() is False
    assert tools.window_build_number() == -1


def test_windows11_implies_windows10():
    assert (not tools.is_windows11_or_greater()) or tools.is_windows10_or_greater()


def _fake_run(stdout):
    def run(args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr=b"")

    return run


def test_wallpaper_ubuntu(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(tools.platform, "freedesktop_os_release", lambda: {"ID": "ubuntu"})
    monkeypatch.setattr(subprocess, "run", _fake_run(b"'file:///home/u/bg.png'\n"))
    assert tools.get_wallpaper_file_path() == "/home/u/bg.png"


def test_wallpaper_deepin(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(tools.platform, "freedesktop_os_release", lambda: {"ID": "uos"})
    reply = b'method return time=1\n   string "file:///usr/share/wp/a.jpg"\n'
    monkeypatch.setattr(subprocess, "run", _fake_run(reply))
    assert tools.get_wallpaper_file_path() == "/usr/share/wp/a.jpg"


def test_wallpaper_unknown_distribution(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(tools.platform, "freedesktop_os_release", lambda: {"ID": "other"})
    assert tools.get_wallpaper_file_path() == ""


def test_wallpaper_macos_default(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(subprocess, "run", _fake_run(b"  \n"))
    assert tools.get_wallpaper_file_path() == "/System/Library/CoreServices/DefaultDesktop.heic"


def test_show_file_in_folder_linux(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(subprocess, "Popen", lambda args, **kw: calls.append(args))
    tools.show_file_in_folder(str(tmp_path / "f.txt"))
    assert calls == [["xdg-open", str(tmp_path)]]


def test_image_main_color_uniform():
    color = Color(10, 20, 30)
    image = [[color] * 50 for _ in range(50)]
    assert tools.image_main_color(image) == color
    assert tools.image_main_color(image, 100) == Color(255, 255, 255)


def test_image_main_color_samples_every_twentieth_pixel():
    image = [
        [(200, 0, 0) if x % 20 == 0 and y % 20 == 0 else (0, 0, 0) for x in range(45)]
        for y in range(45)
    ]
    assert tools.image_main_color(image) == Color(200, 0, 0)


def test_image_main_color_empty_raises():
    with pytest.raises(ValueError):
        tools.image_main_color([])