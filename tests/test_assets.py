from pathlib import Path

PNG = b"\x89PNG\r\n\x1a\nfake"


def test_save_image_returns_relative_path(storage, note):
    rel = storage.save_image(note.path, "shot.png", PNG)
    assert rel == "images/shot.png"
    assert (Path(note.path) / rel).read_bytes() == PNG


def test_traversal_is_flattened(storage, note, tmp_path):
    rel = storage.save_image(note.path, "../../evil.png", PNG)
    assert rel == "images/evil.png"
    written = sorted(tmp_path.rglob("evil.png"))
    assert written == [Path(note.path) / "images" / "evil.png"]


def test_windows_style_traversal_is_flattened(storage, note):
    assert storage.save_image(note.path, "..\\..\\evil.png", PNG) == "images/evil.png"


def test_fallback_name(storage, note):
    assert storage.save_image(note.path, "", PNG) == "images/image.png"
    assert storage.save_image(note.path, "..", PNG) == "images/image.png"


def test_same_name_overwrites(storage, note):
    storage.save_image(note.path, "a.png", b"old bytes")
    storage.save_image(note.path, "a.png", b"new")
    images = Path(note.path) / "images"
    assert (images / "a.png").read_bytes() == b"new"
    assert [p.name for p in images.iterdir()] == ["a.png"]


def test_empty_payload(storage, note):
    rel = storage.save_image(note.path, "empty.png", b"")
    assert (Path(note.path) / rel).read_bytes() == b""
