"""Tests for filename sanitization."""

from jair_harvester.downloaders import pdf_filename, sanitize_filename


class TestSanitizeFilename:
    """Tests for sanitize_filename()."""

    def test_whitespace_becomes_underscores(self):
        """Runs of whitespace collapse to a single underscore."""
        assert sanitize_filename("Learning  to\tPlan") == "Learning_to_Plan"

    def test_path_separators_replaced(self):
        """Slashes cannot escape the output directory."""
        assert sanitize_filename("../etc/passwd") == "etc_passwd"
        assert sanitize_filename("a\\b") == "a_b"

    def test_reserved_characters_replaced(self):
        """Characters reserved on common filesystems are replaced."""
        assert sanitize_filename('What? A "Survey": <Part|1>*') == "What_A_Survey_Part_1"

    def test_control_characters_replaced(self):
        """Control characters are removed from the name."""
        assert sanitize_filename("a\x00b\x07c") == "a_b_c"

    def test_unicode_preserved(self):
        """Non-ASCII letters are kept."""
        assert sanitize_filename("Théorie des jeux") == "Théorie_des_jeux"

    def test_empty_title_gets_default(self):
        """A title with nothing usable becomes 'untitled'."""
        assert sanitize_filename("") == "untitled"
        assert sanitize_filename(" /// ") == "untitled"

    def test_long_title_truncated(self):
        """Very long titles are cut to a safe length."""
        assert len(sanitize_filename("x" * 500)) == 200

    def test_long_multibyte_title_truncated_by_bytes(self):
        """Multi-byte titles are cut by encoded length on a character boundary."""
        result = sanitize_filename("\u8ad6" * 200)

        assert len(result.encode("utf-8")) <= 200
        assert result == "\u8ad6" * 66

    def test_pdf_filename(self):
        """pdf_filename appends the .pdf suffix to the sanitized stem."""
        assert pdf_filename("Learning to Plan") == "Learning_to_Plan.pdf"
