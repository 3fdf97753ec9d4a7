import unittest

from commitwizard.vcs.status_parser import (
    StatusEntry,
    parse_status,
    parse_status_line,
    rename_destination,
    unquote_path,
)


class TestParseStatus(unittest.TestCase):
    def test_plain_lines(self) -> None:
        entries = parse_status([" M src/index.js", "A  added.py", "?? new file.txt"])
        self.assertEqual(
            entries,
            [
                StatusEntry(label="M src/index.js", path="src/index.js"),
                StatusEntry(label="A added.py", path="added.py"),
                StatusEntry(label="?? new file.txt", path="new file.txt"),
            ],
        )

    def test_path_is_trimmed_remainder(self) -> None:
        for line in ["M  docs/readme.md", "MM lib/a b.py  ", " D gone.txt"]:
            with self.subTest(line=line):
                self.assertEqual(parse_status_line(line).path, line[3:].strip())

    def test_rename_uses_destination(self) -> None:
        entry = parse_status_line("R  old name.txt -> new name.txt")
        self.assertEqual(entry.path, "new name.txt")
        self.assertEqual(entry.label, "R old name.txt -> new name.txt")

    def test_quoted_rename_is_unquoted(self) -> None:
        entry = parse_status_line('R  "old name.txt" -> "new name.txt"')
        self.assertEqual(entry.path, "new name.txt")
        self.assertEqual(entry.label, 'R "old name.txt" -> "new name.txt"')

    def test_arrow_in_plain_file_name_is_not_a_rename(self) -> None:
        entry = parse_status_line("?? a->b.txt")
        self.assertEqual(entry.path, "a->b.txt")
        self.assertEqual(parse_status_line(" M x -> y.txt").path, "x -> y.txt")

    def test_copy_uses_destination(self) -> None:
        self.assertEqual(parse_status_line("C  src.py -> dst.py").path, "dst.py")

    def test_quoted_source_containing_arrow(self) -> None:
        entry = parse_status_line('R  "odd -> name.txt" -> "new name.txt"')
        self.assertEqual(entry.path, "new name.txt")
        self.assertEqual(rename_destination('"a \\" -> b" -> c.txt'), "c.txt")

    def test_blank_lines_are_dropped(self) -> None:
        self.assertEqual(parse_status([""]), [])
        self.assertEqual(parse_status(["   ", "", "\t"]), [])
        self.assertEqual(len(parse_status(["", "M  a.py", "  "])), 1)


class TestUnquotePath(unittest.TestCase):
    def test_unquoted_path_unchanged(self) -> None:
        self.assertEqual(unquote_path("plain.txt"), "plain.txt")
        self.assertEqual(unquote_path('"'), '"')

    def test_escapes(self) -> None:
        self.assertEqual(unquote_path('"tab\\there"'), "tab\there")
        self.assertEqual(unquote_path('"quote\\"d"'), 'quote"d')
        self.assertEqual(unquote_path('"back\\\\slash"'), "back\\slash")

    def test_octal_utf8(self) -> None:
        # "é" is quoted by git as \303\251
        self.assertEqual(unquote_path('"caf\\303\\251.txt"'), "café.txt")


if __name__ == "__main__":
    unittest.main()
