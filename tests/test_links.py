from onemd_editor.core.links import to_display_markdown, to_relative_markdown


def test_display_resolves_relative_image(tmp_path):
    note = tmp_path / "Work" / "Ideas"
    out = to_display_markdown("see ![pic](images/a.png) here", note)
    assert out == f"see ![pic]({(note / 'images' / 'a.png').as_uri()}) here"


def test_display_leaves_external_images(tmp_path):
    text = "![a](https://example.com/a.png) ![b](file:///x/b.png)"
    assert to_display_markdown(text, tmp_path) == text


def test_display_ignores_plain_links(tmp_path):
    text = "[not an image](images/a.png)"
    assert to_display_markdown(text, tmp_path) == text


def test_display_decodes_escaped_names(tmp_path):
    out = to_display_markdown("![x](images/my%20pic.png)", tmp_path)
    assert out == f"![x]({(tmp_path / 'images' / 'my pic.png').as_uri()})"


def test_relative_undoes_display(tmp_path):
    note = tmp_path / "Work" / "Ideas"
    text = "# T\n\n![pic](images/a.png)\n![ext](https://example.com/x.png)\n"
    assert to_relative_markdown(to_display_markdown(text, note), note) == text


def test_relative_strips_plain_path(tmp_path):
    note = tmp_path / "Ideas"
    assert to_relative_markdown(f"![x]({note}/images/a.png)", note) == "![x](images/a.png)"


def test_relative_accepts_backslashes(tmp_path):
    note = tmp_path / "Ideas"
    windows_style = f"{note}/images/a.png".replace("/", "\\")
    assert to_relative_markdown(f"![x]({windows_style})", note) == "![x](images/a.png)"


def test_relative_leaves_foreign_paths(tmp_path):
    text = "![x](/somewhere/else.png)"
    assert to_relative_markdown(text, tmp_path / "Ideas") == text
