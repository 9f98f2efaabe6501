from __future__ import annotations

from react_image_analyzer.models import AccessibilityFinding, MarkupAttribute, MarkupElement
from react_image_analyzer.rules import (
    MISSING_ALT_MESSAGE,
    analyze_source,
    analyze_sources,
    check_missing_alt,
)

GALLERY = """
import React from "react";

export default function Gallery({ photos }) {
  return (
    <main>
      <img src="/hero.png" />
      <img src="/logo.png" alt="Company logo" />
      <img src="/spacer.gif" alt="" />
      {photos.map((photo) => <img key={photo.id} src={photo.url} />)}
      <Image src="/next.png" />
      <img src="/footer.png" {...photo.props} />
    </main>
  );
}
"""


def test_message_is_fixed():
    assert MISSING_ALT_MESSAGE == "Missing alt attribute on <img> tag"


def test_one_finding_per_bare_img(write_text):
    path = write_text("src/Gallery.jsx", GALLERY)
    findings = analyze_source(str(path))
    assert findings == [AccessibilityFinding(str(path), MISSING_ALT_MESSAGE)] * 3


def test_empty_alt_counts_as_present():
    elements = [MarkupElement("img", (MarkupAttribute("alt", True),)), MarkupElement("img", (MarkupAttribute("alt", False),))]
    assert check_missing_alt("a.jsx", elements) == []


def test_check_missing_alt_counts_every_offender():
    bare = MarkupElement("img", (MarkupAttribute("src", True),))
    described = MarkupElement("img", (MarkupAttribute("alt", True),))
    findings = check_missing_alt("a.jsx", [bare, described, bare, bare])
    assert len(findings) == 3
    assert all(finding.file_path == "a.jsx" for finding in findings)


def test_custom_components_never_produce_findings(write_text):
    path = write_text("Avatar.tsx", 'export const Avatar = () => <Image src="me.png" />;\n')
    assert analyze_source(str(path)) == []


def test_typescript_component(write_text):
    source = """
    type Props = { url: string };
    export function Thumb({ url }: Props): JSX.Element {
      return <img src={url} width={64} />;
    }
    """
    path = write_text("Thumb.tsx", source)
    assert len(analyze_source(str(path))) == 1


def test_findings_follow_file_then_document_order(write_text):
    first = write_text("a.jsx", 'export const A = () => <div><img src="1" /><img src="2" /></div>;\n')
    second = write_text("b.js", 'export const B = () => <img src="3" />;\n')
    result = analyze_sources([str(second), str(first)])
    assert [finding.file_path for finding in result.items] == [str(second), str(first), str(first)]
    assert result.failures == []


def test_unparsable_file_is_skipped_without_aborting(write_text):
    good = write_text("good.jsx", 'export const G = () => <img src="g.png" />;\n')
    broken = write_text("broken.tsx", "export const B = () => <div><img src='b.png' />;\n")
    also_good = write_text("also.ts", "export const n: number = 1;\n")
    result = analyze_sources([str(good), str(broken), str(also_good)])
    assert result.items == [AccessibilityFinding(str(good), MISSING_ALT_MESSAGE)]
    assert [failure.path for failure in result.failures] == [str(broken)]


def test_non_utf8_bytes_are_replaced_and_still_checked(tmp_path):
    latin1 = tmp_path / "latin1.jsx"
    latin1.write_bytes("// caf\u00e9\nexport const A = () => <img src=\"a.png\" />;\n".encode("latin-1"))
    missing = tmp_path / "missing.jsx"
    result = analyze_sources([str(latin1), str(missing)])
    assert result.items == [AccessibilityFinding(str(latin1), MISSING_ALT_MESSAGE)]
    assert [failure.path for failure in result.failures] == [str(missing)]
