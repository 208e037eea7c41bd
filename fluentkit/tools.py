"""Assorted platform, file, encoding and image helpers."""

from __future__ import annotations

import base64
import binascii
import functools
import hashlib
import os
import platform
import re
import shutil
import subprocess
import sys
import time
import uuid as _uuid
from html.parser import HTMLParser
from typing import Any, Iterable, Sequence
from urllib.parse import quote, unquote, urlparse

from .color import Color

_MAC_DEFAULT_WALLPAPER = "/System/Library/CoreServices/DefaultDesktop.heic"
_BASE64_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


def uuid() -> str:
    """Return a random UUID as 32 lowercase hex digits."""
    return _uuid.uuid4().hex


def read_file(file_name: str) -> str:
    """Return the text of ``file_name``, or an empty string if it cannot be read."""
    try:
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return ""


def is_macos() -> bool:
    return sys.platform == "darwin"


def is_linux() -> bool:
    return sys.platform.startswith("linux")


def is_win() -> bool:
    return sys.platform == "win32"


def to_local_path(url: str) -> str:
    """Return the local path of a ``file:`` URL, or an empty string for other URLs."""
    parsed = urlparse(url)
    if parsed.scheme.lower() != "file":
        return ""
    path = unquote(parsed.path)
    if parsed.netloc and parsed.netloc.lower() != "localhost":
        return f"//{parsed.netloc}{path}"
    if _DRIVE_PATH.match(path):
        path = path[1:]
    return path


def get_file_name_by_url(url: str) -> str:
    """Return the last path component of a ``file:`` URL."""
    return to_local_path(url).rpartition("/")[2]


def get_url_by_file_path(path: str) -> str:
    """Return the ``file:`` URL for a local path."""
    if not path:
        return ""
    if is_win():
        path = path.replace("\\", "/")
    if path.startswith("//"):
        return "file:" + quote(path, safe="/:@!$&'()*+,;=-._~")
    if re.match(r"^[A-Za-z]:", path):
        path = "/" + path
    return "file://" + quote(path, safe="/:@!$&'()*+,;=-._~")


def get_application_dir_path() -> str:
    """Return the directory holding the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.dirname(os.path.abspath(program))


def md5(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def to_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def from_base64(text: str) -> str:
    """Decode base64 leniently: characters outside the alphabet are skipped."""
    cleaned = _BASE64_ALPHABET.sub("", text)
    cleaned = cleaned[: len(cleaned) - len(cleaned) % 4 + (4 if len(cleaned) % 4 > 1 else 0)]
    if len(cleaned) % 4:
        cleaned += "=" * (4 - len(cleaned) % 4)
    try:
        raw = base64.b64decode(cleaned)
    except binascii.Error:
        raw = b""
    return raw.decode("utf-8", errors="replace")


def remove_dir(dir_path: str) -> bool:
    """Delete a directory tree; a missing directory counts as removed."""
    if not os.path.exists(dir_path):
        return True
    try:
        shutil.rmtree(dir_path)
    except OSError:
        return False
    return True


def remove_file(file_path: str) -> bool:
    try:
        os.remove(file_path)
    except OSError:
        return False
    return True


def show_file_in_folder(path: str) -> None:
    """Reveal ``path`` in the platform file manager."""
    if is_win():
        subprocess.Popen(["explorer.exe", "/select,", os.path.normpath(path)])
    elif is_linux():
        subprocess.Popen(["xdg-open", os.path.dirname(os.path.abspath(path))])
    elif is_macos():
        subprocess.run(
            ["/usr/bin/osascript", "-e", f'tell application "Finder" to reveal POSIX file "{path}"'],
            check=False,
        )
        subprocess.run(
            ["/usr/bin/osascript", "-e", 'tell application "Finder" to activate'],
            check=False,
        )


def current_timestamp() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class _PlainTextParser(HTMLParser):
    _BLOCK = frozenset(
        {
            "p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "ul", "ol", "tr",
            "table", "blockquote", "pre", "hr", "dl", "dt", "dd", "address",
            "center", "body", "html",
        }
    )
    _SKIP = frozenset({"script", "style", "head", "title"})

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._lines: list[str] = []
        self._current: list[str] = []
        self._skip = 0

    def handle_starttag(self, tag: str, attrs: Any) -> None:
        if tag in self._SKIP:
            self._skip += 1
        elif tag == "br":
            self._break(force=True)
        elif tag in self._BLOCK:
            self._break()

    def handle_endtag(self, tag: str) -> None:
        if tag in self._SKIP:
            self._skip = max(0, self._skip - 1)
        elif tag in self._BLOCK:
            self._break()

    def handle_data(self, data: str) -> None:
        if self._skip:
            return
        text = re.sub(r"[ \t\r\n\f]+", " ", data)
        if not self._current or self._current[-1].endswith(" "):
            text = text.lstrip(" ")
        if text:
            self._current.append(text)

    def _break(self, force: bool = False) -> None:
        line = "".join(self._current).rstrip(" ")
        if line or force:
            self._lines.append(line)
        self._current = []

    def text(self) -> str:
        self._break()
        return "\n".join(self._lines).replace("\xa0", " ")


def html_to_plain_text(html: str) -> str:
    """Render HTML markup as plain text, one line per block."""
    parser = _PlainTextParser()
    parser.feed(html)
    parser.close()
    return parser.text()


def window_build_number() -> int:
    """The Windows build number, or -1 off Windows or when it is not recorded."""
    if not is_win():
        return -1
    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE, r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
        ) as key:
            value, _ = winreg.QueryValueEx(key, "CurrentBuildNumber")
    except OSError:
        return -1
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@functools.lru_cache(maxsize=None)
def is_windows11_or_greater() -> bool:
    return is_win() and window_build_number() >= 22000


@functools.lru_cache(maxsize=None)
def is_windows10_or_greater() -> bool:
    return is_win() and window_build_number() >= 10240


def _run_output(args: Sequence[str]) -> str:
    try:
        completed = subprocess.run(list(args), capture_output=True, check=False)
    except OSError:
        return ""
    output = completed.stdout or b""
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    return output.strip()


def _linux_distribution() -> str:
    try:
        return platform.freedesktop_os_release().get("ID", "")
    except OSError:
        return ""


def get_wallpaper_file_path() -> str:
    """Return the current desktop wallpaper path, or an empty string if unknown."""
    if is_win():
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, r"Control Panel\Desktop") as key:
                value, _ = winreg.QueryValueEx(key, "Wallpaper")
        except OSError:
            return ""
        return str(value)
    if is_linux():
        distribution = _linux_distribution()
        if distribution == "uos":
            result = _run_output(
                [
                    "dbus-send",
                    "--session",
                    "--type=method_call",
                    "--print-reply",
                    "--dest=com.deepin.wm",
                    "/com/deepin/wm",
                    "com.deepin.wm.GetCurrentWorkspaceBackgroundForMonitor",
                    f"string:'{current_timestamp()}'",
                ]
            )
            start = result.find("file:///")
            if start != -1:
                return result[start + 7 : len(result) - 1]
        elif distribution == "ubuntu":
            result = _run_output(["gsettings", "get", "org.gnome.desktop.background", "picture-uri"])
            result = result[1:-1]
            if result.startswith("file:///"):
                return result[7:]
        return ""
    if is_macos():
        result = _run_output(
            [
                "osascript",
                "-e",
                'tell application "Finder" to get POSIX path of (desktop picture as alias)',
            ]
        )
        return result or _MAC_DEFAULT_WALLPAPER
    return ""


def _channels(pixel: Any) -> tuple[int, int, int]:
    if isinstance(pixel, Color):
        return pixel.red, pixel.green, pixel.blue
    red, green, blue = tuple(pixel)[:3]
    return red, green, blue


def image_main_color(image: Sequence[Sequence[Any]], bright: float = 1) -> Color:
    """Average colour of every 20th pixel in both directions, scaled by ``bright``.

    ``image`` is a sequence of rows; each pixel is a Color or an (r, g, b[, a]) tuple.
    """
    step = 20
    samples: Iterable[Any] = (
        pixel for row in image[::step] for pixel in row[::step]
    )
    count = red = green = blue = 0
    for pixel in samples:
        r, g, b = _channels(pixel)
        red += r
        green += g
        blue += b
        count += 1
    if count == 0:
        raise ValueError("image has no pixels")

    def scale(total: int) -> int:
        return min(255, int(bright * total / count))

    return Color(scale(red), scale(green), scale(blue))