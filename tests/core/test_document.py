import pytest

from hostsedit.core import Document, HostsLine, LineKind


def _make_line(**overrides) -> HostsLine:
    return HostsLine(**overrides)


# ===========================================================
# HostsLine
# ===========================================================

class TestHostsLine:

    def test_mapping_kind(self):
        line = HostsLine.mapping("1.1.1.1", "a", "b")
        assert line.kind is LineKind.MAPPING
        assert line.is_mapping
        assert line.host_names == ("a", "b")

    def test_comment_kind_wins_over_content(self):
        line = _make_line(is_comment=True, ip="1.1.1.1", hosts={"a": None})
        assert line.kind is LineKind.COMMENT
        assert not line.is_mapping

    def test_passthrough_kind(self):
        line = _make_line(raw_passthrough="garbage")
        assert line.kind is LineKind.PASSTHROUGH
        assert not line.is_mapping

    def test_mapping_dedupes_hosts(self):
        line = HostsLine.mapping("1.1.1.1", "a", "a", "b")
        assert line.host_names == ("a", "b")

    def test_add_host_is_idempotent(self):
        line = HostsLine.mapping("1.1.1.1", "a")
        line.add_host("b")
        line.add_host("b")
        assert line.host_names == ("a", "b")

    def test_remove_host(self):
        line = HostsLine.mapping("1.1.1.1", "a", "b")
        assert line.remove_host("a")
        assert not line.remove_host("a")
        assert line.host_names == ("b",)

    def test_each_line_gets_unique_id(self):
        assert HostsLine().line_id != HostsLine().line_id


# ===========================================================
# Construction
# ===========================================================

class TestDocumentConstruction:

    def test_empty_document(self):
        doc = Document()
        assert len(doc) == 0
        assert not doc.lines

    def test_from_lines(self):
        lines = [_make_line(is_comment=True, raw_passthrough="comment")]
        doc = Document(lines=lines)
        assert len(doc) == 1
        assert doc[0].raw_passthrough == "comment"

    def test_file_path(self):
        doc = Document(file_path="/tmp/hosts")
        assert doc.file_path == "/tmp/hosts"


# ===========================================================
# Read access
# ===========================================================

class TestDocumentRead:

    @pytest.fixture
    def doc(self):
        lines = [
            _make_line(line_id="aaa", is_comment=True, raw_passthrough="first"),
            _make_line(line_id="bbb", ip="1.1.1.1", hosts={"a": None}),
            _make_line(line_id="ccc", raw_passthrough="junk"),
            _make_line(line_id="ddd", ip="2.2.2.2", hosts={"b": None}),
        ]
        return Document(lines=lines)

    def test_getitem(self, doc):
        assert doc[1].line_id == "bbb"
        assert doc[-1].line_id == "ddd"

    def test_len(self, doc):
        assert len(doc) == 4

    def test_iter_follows_order(self, doc):
        assert [line.line_id for line in doc] == ["aaa", "bbb", "ccc", "ddd"]

    def test_lines_returns_immutable_view(self, doc):
        view = doc.lines
        assert isinstance(view, tuple)
        assert len(view) == len(doc)

    def test_mapping_lines_skip_comments_and_passthrough(self, doc):
        assert [line.line_id for line in doc.mapping_lines()] == ["bbb", "ddd"]


# ===========================================================
# Mutations
# ===========================================================

def _ids(doc: Document) -> list[str]:
    return [line.line_id for line in doc]


class TestDocumentInsert:

    def test_insert_at_beginning(self):
        doc = Document(lines=[
            _make_line(line_id="a"),
            _make_line(line_id="b"),
        ])
        doc.insert_line(0, _make_line(line_id="z"))
        assert _ids(doc) == ["z", "a", "b"]

    def test_insert_at_middle(self):
        doc = Document(lines=[
            _make_line(line_id="a"),
            _make_line(line_id="b"),
        ])
        doc.insert_line(1, _make_line(line_id="m"))
        assert _ids(doc) == ["a", "m", "b"]

    def test_insert_past_end_appends(self):
        doc = Document(lines=[_make_line(line_id="a")])
        doc.insert_line(10, _make_line(line_id="z"))
        assert _ids(doc) == ["a", "z"]
        # Index must still point at the real position
        doc.remove_line("z")
        assert _ids(doc) == ["a"]

    def test_insert_duplicate_raises(self):
        doc = Document(lines=[_make_line(line_id="x1")])
        with pytest.raises(ValueError, match="Duplicate"):
            doc.insert_line(0, _make_line(line_id="x1"))

    def test_insert_invalidates_lines_cache(self):
        doc = Document(lines=[_make_line(line_id="a")])
        before = doc.lines
        doc.insert_line(0, _make_line(line_id="z"))
        assert len(before) == 1
        assert len(doc.lines) == 2


class TestDocumentRemove:

    def test_remove_reindexes(self):
        doc = Document(lines=[
            _make_line(line_id="a"),
            _make_line(line_id="b"),
            _make_line(line_id="c"),
        ])
        removed = doc.remove_line("a")
        assert removed.line_id == "a"
        assert _ids(doc) == ["b", "c"]
        # Later removals use the shifted positions
        assert doc.remove_line("c").line_id == "c"
        assert _ids(doc) == ["b"]

    def test_remove_after_insert_at_top(self):
        doc = Document(lines=[
            _make_line(line_id="a"),
            _make_line(line_id="b"),
        ])
        doc.insert_line(0, _make_line(line_id="z"))
        doc.remove_line("b")
        assert _ids(doc) == ["z", "a"]

    def test_remove_missing_raises(self):
        doc = Document()
        with pytest.raises(KeyError):
            doc.remove_line("nope")
