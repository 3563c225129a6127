import pytest

from kubecodec.codec.splitter import DocumentSplitter, split_documents


def test_splits_on_separator_line():
    assert split_documents("kind: A\n---\nkind: B\n") == ["kind: A", "kind: B"]


def test_inline_triple_dash_is_not_a_separator():
    """
    ROBUSTNESS TEST: `---` inside a value must never cut a document.
    """
    text = "data:\n  note: foo---bar\n  other: ----\n"
    assert split_documents(text) == [text.rstrip()]


def test_indented_separator_inside_block_scalar_is_kept():
    text = "data:\n  script: |\n    echo start\n    ---\n    echo end\n"
    assert len(split_documents(text)) == 1


@pytest.mark.parametrize("text", ["", "   \n\n", "---\n---\n", "---", "\n---   \n\t\n---\n"])
def test_blank_documents_are_dropped(text):
    assert split_documents(text) == []


def test_leading_and_trailing_separators():
    text = "---\napiVersion: v1\nkind: ConfigMap\n---\n"
    assert split_documents(text) == ["apiVersion: v1\nkind: ConfigMap"]


def test_separator_with_trailing_whitespace_and_crlf():
    text = "a: 1\r\n---  \r\nb: 2\r\n"
    assert split_documents(text) == ["a: 1", "b: 2"]


def test_first_line_indentation_is_preserved():
    """Stripping the first line's indent would change how the document parses."""
    text = "\n\n  a: 1\n  b: 2\n"
    assert split_documents(text) == ["  a: 1\n  b: 2"]


def test_order_is_preserved_without_deduplication():
    text = "kind: A\n---\nkind: B\n---\nkind: A\n"
    assert DocumentSplitter().split(text) == ["kind: A", "kind: B", "kind: A"]


def test_byte_order_mark_is_ignored():
    assert split_documents("\ufeff---\nkind: A\n") == ["kind: A"]


def test_directives_stay_with_their_document():
    text = "%YAML 1.2\n---\nkind: A\n---\nkind: B\n"
    assert split_documents(text) == ["%YAML 1.2\n---\nkind: A", "kind: B"]


def test_directives_between_documents():
    text = "kind: A\n---\n# pinned\n%TAG !k8s! tag:k8s.io,2024:\n---\nkind: B\n"
    assert split_documents(text) == ["kind: A", "# pinned\n%TAG !k8s! tag:k8s.io,2024:\n---\nkind: B"]


def test_percent_inside_a_document_is_not_a_directive():
    text = "data:\n  ratio: 50%\n  note: |\n    %not a directive\n"
    assert split_documents(text) == [text.rstrip()]
