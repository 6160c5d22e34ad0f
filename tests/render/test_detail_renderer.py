from snippetdoc.render import render_detail
from snippetdoc.render.detail import HEADER, render_section
from snippetdoc.snippet import Snippet


def _snippet(title="Example", **fields):
    fields.setdefault("contents", "let x = 1")
    fields.setdefault("language", "Xcode.SourceCodeLanguage.Swift")
    fields.setdefault("source_name", "example.codesnippet")
    return Snippet(title=title, **fields)


def test_section_with_all_metadata():
    section = render_section(_snippet(shortcut="ex", summary="An example"))

    assert section == (
        "## Example\n\n"
        "**Language:** Swift  \n"
        "**Completion Shortcut:** `ex`  \n"
        "**Description:** An example  \n"
        "**File:** `example.codesnippet`  \n\n"
        "```swift\n"
        "let x = 1\n"
        "```\n\n"
        "---\n\n"
    )


def test_section_omits_empty_optional_metadata():
    section = render_section(_snippet(shortcut="", summary=""))

    assert "Completion Shortcut" not in section
    assert "Description" not in section
    assert "**Language:** Swift  \n**File:**" in section


def test_contents_round_trip_byte_identical():
    contents = "\n\tfunc f() {\n\t\t// keep   spacing\n\t}\n\n"
    section = render_section(_snippet(contents=contents, language="Xcode.SourceCodeLanguage.Objective-C"))

    body = section.split("```objective-c\n", 1)[1].rsplit("\n```\n\n---\n\n", 1)[0]
    assert body == contents


def test_fence_grows_when_contents_contain_fences():
    section = render_section(_snippet(contents="```\nnested\n```"))

    assert "````swift\n```\nnested\n```\n````\n" in section


def test_document_orders_sections_by_title():
    document = render_detail([_snippet("b"), _snippet("a"), _snippet("C")])

    assert document.startswith(HEADER)
    positions = [document.index(f"## {title}\n") for title in ("C", "a", "b")]
    assert positions == sorted(positions)
