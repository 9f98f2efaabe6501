from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image
from rich.console import Console


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    def _make(
        relative: str,
        size: tuple[int, int] = (100, 50),
        image_format: str = "PNG",
        pad_to: int | None = None,
    ) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color=(200, 40, 40)).save(path, image_format)
        if pad_to is not None:
            current = path.stat().st_size
            assert current <= pad_to
            with path.open("ab") as handle:
                handle.write(b"\x00" * (pad_to - current))
        return path

    return _make


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, soft_wrap=True, width=200)
    return console, buffer
