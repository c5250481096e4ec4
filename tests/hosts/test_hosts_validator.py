from hostsedit.hosts.parser import parse_line
from hostsedit.hosts.validator import validate_strict


def _lines(*texts):
    return [parse_line(t) for t in texts]


class TestValidateStrict:

    def test_clean_document(self):
        result = validate_strict(_lines(
            "# header",
            "127.0.0.1 localhost",
            "::1 localhost6",
        ))
        assert result.is_valid
        assert bool(result)
        assert result.warnings == []

    def test_duplicate_host(self):
        result = validate_strict(_lines("1.1.1.1 dup", "2.2.2.2 dup"))
        assert not result
        assert len(result.errors) == 1
        assert "'dup'" in result.errors[0]
        assert result.warnings == result.errors

    def test_duplicate_within_comment_is_ignored(self):
        result = validate_strict(_lines("1.1.1.1 dup", "# 2.2.2.2 dup"))
        assert result.is_valid

    def test_same_ip_on_two_lines_is_fine(self):
        result = validate_strict(_lines("1.1.1.1 a", "1.1.1.1 b"))
        assert result.is_valid

    def test_passthrough_row_rejected(self):
        result = validate_strict(_lines("127.0.0.1 localhost", "garbage"))
        assert not result.is_valid
        assert "garbage" in result.errors[0]
        # Unparsed rows are errors only, not duplicate warnings
        assert result.warnings == []

    def test_passthrough_comment_allowed(self):
        result = validate_strict(_lines("# just words"))
        assert result.is_valid

    def test_reports_every_problem(self):
        result = validate_strict(_lines(
            "junk",
            "1.1.1.1 a b",
            "2.2.2.2 a",
            "3.3.3.3 b",
        ))
        assert len(result.errors) == 3
