import pytest

from src.book.errors import TemplateNotFoundError, TemplateResourceNotFoundError
from src.book.segmenter import segment_document
from src.render.markdown import MarkdownRenderer
from src.render.template import TemplateRenderer


SOURCE = "# Demo *Book*\n## First Part\nSome text.\n### Inner\nMore.\n## Second Part\nEnd.\n"


def _model():
    return segment_document(SOURCE, MarkdownRenderer())


def test_default_template_renders_summary_and_sections():
    html = TemplateRenderer().render(_model(), book_title="Demo", highlight_css=".k { color: red }")

    assert "<title>Demo</title>" in html
    assert "Demo <em>Book</em>" in html
    assert 'id="section-first-part"' in html
    assert 'href="#inner"' in html
    assert '<span class="label">1.1.</span>' in html
    assert "<p>Some text.</p>" in html
    assert ".k { color: red }" in html
    assert '<style type="text/css">' in html
    assert '<script type="text/javascript">' in html


def _write_template(folder, body):
    folder.mkdir()
    (folder / "index.html").write_text(body, encoding="utf-8")


def test_missing_template_folder_and_file(tmp_path):
    with pytest.raises(TemplateNotFoundError):
        TemplateRenderer(tmp_path / "missing")

    (tmp_path / "empty").mkdir()
    with pytest.raises(TemplateNotFoundError) as excinfo:
        TemplateRenderer(tmp_path / "empty")
    assert excinfo.value.path.name == "index.html"


def test_include_wraps_resources_by_extension(tmp_path):
    folder = tmp_path / "tpl"
    _write_template(folder, '{{ include("a.css") }}|{{ include("b.js") }}|{{ include("c.txt") }}')
    (folder / "a.css").write_text("body{}", encoding="utf-8")
    (folder / "b.js").write_text("run()", encoding="utf-8")
    (folder / "c.txt").write_text("<i>raw</i>", encoding="utf-8")

    html = TemplateRenderer(folder).render(_model())

    assert html == '<style type="text/css">body{}</style>|<script type="text/javascript">run()</script>|<i>raw</i>'


def test_missing_included_resource_is_reported(tmp_path):
    folder = tmp_path / "tpl"
    _write_template(folder, '{{ include("gone.css") }}')

    with pytest.raises(TemplateResourceNotFoundError):
        TemplateRenderer(folder).render(_model())


def test_release_mode_minifies_output(tmp_path):
    folder = tmp_path / "tpl"
    _write_template(
        folder,
        "<html>\n  <!-- drop me -->\n  <body>\n    <p>{{ title.text }}</p>\n  </body>\n</html>\n",
    )

    debug_html = TemplateRenderer(folder).render(_model())
    release_html = TemplateRenderer(folder, release=True).render(_model())

    assert "drop me" in debug_html
    assert "drop me" not in release_html
    assert len(release_html) < len(debug_html)
    assert "Demo *Book*" in release_html


def test_headings_before_first_section_have_empty_section_attribute():
    model = segment_document("# T\n### Early\n## Part\n", MarkdownRenderer())

    html = TemplateRenderer().render(model)

    assert 'data-section="None"' not in html
    assert 'data-section=""' in html
    assert 'data-section="part"' in html
