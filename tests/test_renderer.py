from onemd_editor.services.markdown_renderer import MarkdownRenderer


def test_page_wraps_body():
    page = MarkdownRenderer(title="Ideas").render_page("# Hello\n\ntext")
    assert page.startswith("<html>")
    assert "<title>Ideas</title>" in page
    assert "Hello</h1>" in page
    assert "<p>text</p>" in page


def test_fenced_code():
    body = MarkdownRenderer().render_body("```js\nconsole.log(1);\n```\n")
    assert "<pre>" in body
    assert "console.log(1);" in body


def test_scripts_are_stripped():
    body = MarkdownRenderer().render_body("hi <script>alert(1)</script>")
    assert "<script>" not in body


def test_images_point_into_note_folder(tmp_path):
    note = tmp_path / "Ideas"
    body = MarkdownRenderer().render_body("![pic](images/a.png)", note_path=note)
    assert "<img" in body
    assert (note / "images" / "a.png").as_uri() in body


def test_without_note_path_links_stay_relative():
    body = MarkdownRenderer().render_body("![pic](images/a.png)")
    assert 'src="images/a.png"' in body
