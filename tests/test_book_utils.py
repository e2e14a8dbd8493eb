from src.book.utils import slugify, split_lines, strip_html_comments


def test_slugify_lowercases_and_dashes_spaces():
    assert slugify("Hello World!") == "hello-world"
    assert slugify("snake_case Name") == "snake_case-name"


def test_slugify_drops_non_ascii_and_punctuation():
    assert slugify("Café au lait (v2.0)") == "caf-au-lait-v20"
    assert slugify("") == ""
    assert slugify("!!!") == ""


def test_slugify_keeps_repeated_dashes_and_is_idempotent():
    slug = slugify("A  -  B")
    assert slug == "a-----b"
    assert slugify(slug) == slug
    assert slugify(slugify("Numbering & Labels")) == slugify("Numbering & Labels")


def test_strip_html_comments_handles_multiline_comments():
    source = "# Title\n<!-- one -->\n## Section\n<!--\n# not a title\n-->\ntext <!-- inline --> end\n"

    stripped = strip_html_comments(source)

    assert "not a title" not in stripped
    assert "one" not in stripped
    assert "text  end" in stripped


def test_split_lines_accepts_every_newline_style():
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]
    assert split_lines("a\n") == ["a", ""]
