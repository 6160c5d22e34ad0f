from xml.sax.saxutils import escape

import pytest


PLIST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
	<key>IDECodeSnippetCompletionPrefix</key>
	<string>{shortcut}</string>
	<key>IDECodeSnippetCompletionScopes</key>
	<array>
		<string>All</string>
	</array>
	<key>IDECodeSnippetContents</key>
	<string>{contents}</string>
	<key>IDECodeSnippetIdentifier</key>
	<string>{identifier}</string>
	<key>IDECodeSnippetLanguage</key>
	<string>{language}</string>
	<key>IDECodeSnippetSummary</key>
	<string>{summary}</string>
	<key>IDECodeSnippetTitle</key>
	<string>{title}</string>
	<key>IDECodeSnippetUserSnippet</key>
	<true/>
	<key>IDECodeSnippetVersion</key>
	<integer>2</integer>
</dict>
</plist>
"""


def build_plist(
    *,
    title="KeyChain Service",
    contents="let value = 1\n",
    summary="Stores secrets",
    shortcut="keychain",
    language="Xcode.SourceCodeLanguage.Swift",
    identifier="7C1F2E4A-0000-4000-8000-000000000001",
) -> bytes:
    return PLIST_TEMPLATE.format(
        title=escape(title),
        contents=escape(contents),
        summary=escape(summary),
        shortcut=escape(shortcut),
        language=escape(language),
        identifier=escape(identifier),
    ).encode("utf-8")


@pytest.fixture
def snippet_dir(tmp_path):
    """Directory factory: ``snippet_dir(name=..., **fields)`` writes one plist."""

    def _write(name, **fields):
        path = tmp_path / name
        path.write_bytes(build_plist(**fields))
        return path

    _write.path = tmp_path
    return _write
