from pyinifile import Comparison, IniFile, IniOptions


def ini(text, **options):
    return IniFile(text, IniOptions(**options))


def test_read_value_in_section():
    doc = ini("[A]\nx=1 ; note\n[B]\ny=2\n")
    assert doc.read_value("A", "x") == "1"
    assert doc.read_value("B", "y") == "2"
    assert doc.read_value("B", "x") == ""
    assert doc.read_value("C", "x", "fallback") == "fallback"


def test_global_scope_stops_at_first_section():
    doc = ini("k=v\n[S]\nk=v2\n")
    assert doc.read_value(None, "k") == "v"
    assert doc.read_value("", "k") == "v"
    assert doc.read_value("S", "k") == "v2"

    doc = ini("[S]\nk=v\n")
    assert doc.read_value(None, "k") == ""
    assert doc.read_value(None, "k", "d") == "d"
    assert doc.read_values(None) == []


def test_read_is_idempotent():
    doc = ini("[S]\na=1\nb=2\n")
    assert doc.read_keys_values("S") == doc.read_keys_values("S")
    assert doc.read_value("S", "a") == doc.read_value("S", "a") == "1"


def test_first_match_wins():
    doc = ini("[S]\nk=1\nk=2\n")
    assert doc.read_value("S", "k") == "1"
    assert doc.read_key("S", "2") == "k"


def test_comparison():
    text = "[Sec]\nKey=1\n"
    assert ini(text).read_value("sec", "key") == "1"
    assert ini(text, comparison=Comparison.ORDINAL).read_value("sec", "key") == ""
    assert ini(text, comparison=Comparison.ORDINAL).read_value("Sec", "Key") == "1"


def test_empty_value_gets_default():
    doc = ini("[S]\nk=\n")
    assert doc.read_value("S", "k") == ""
    assert doc.read_value("S", "k", "d") == "d"


def test_quotes_and_escapes():
    text = '[S]\nq = "hello world"\ne = a\\tb\n'
    assert ini(text).read_value("S", "q") == "hello world"
    assert ini(text, trim_value_quotes=False).read_value("S", "q") == '"hello world"'
    assert ini(text).read_value("S", "e") == "a\\tb"
    assert ini(text, allow_escape_chars=True).read_value("S", "e") == "a\tb"
    assert ini(text).read_key("S", "hello world") == "q"


def test_sections_are_rescoped():
    doc = ini("[A]\nk=1\n[B]\nk=2\n[A]\nk=3\n")
    assert doc.read_values_by_key("A", "k") == ["1", "3"]
    assert doc.read_values("B") == ["2"]
    assert doc.read_keys("A") == ["k", "k"]


def test_read_keys_by_value():
    doc = ini("[S]\na=x\nb=y\nc=X\n")
    assert doc.read_keys_by_value("S", "x") == ["a", "c"]
    assert ini(
        "[S]\na=x\nb=y\nc=X\n", comparison=Comparison.ORDINAL
    ).read_keys_by_value("S", "x") == ["a"]


def test_positional_defaults():
    doc = ini("[S]\na=\nb=2\nc=\nd=\n")
    assert doc.read_values("S", ["x", "y"]) == ["x", "2", "y", ""]
    assert doc.read_values("S", ["z"]) == ["z", "2", "z", "z"]
    assert doc.read_values("S") == ["", "2", "", ""]
    assert doc.read_values_by_key("S", "a", ["only"]) == ["only"]
    assert doc.read_keys_values("S", ["x", "y"]) == {
        "a": "x", "b": "2", "c": "y", "d": ""}


def test_duplicate_keys_renamed():
    doc = ini("[S]\nk=1\nk=2\nk=3\n")
    result = doc.read_keys_values("S")
    keys = list(result)

    assert len(result) == 3
    assert keys[0] == "k"
    assert all(i.startswith("k_") and len(i) == len("k_") + 6 for i in keys[1:])
    assert keys[1] != keys[2]
    assert list(result.values()) == ["1", "2", "3"]


def test_duplicate_keys_skipped():
    doc = ini("[S]\nk=1\nk=2\n", allow_duplicate_keys=False)
    assert doc.read_keys_values("S") == {"k": "1"}
    # a skipped duplicate takes no default.
    doc = ini("[S]\nk=\nk=\nj=\n", allow_duplicate_keys=False)
    assert doc.read_keys_values("S", ["a", "b"]) == {"k": "a", "j": "b"}


def test_read_all_keys_values():
    doc = ini("g=0\n[A]\na=1\n[B]\nb=2\n", allow_duplicate_keys=False)
    assert doc.read_all_keys_values() == {"g": "0", "a": "1", "b": "2"}
    assert doc.read_keys_values(None) == {"g": "0"}
    assert doc["A"] == {"a": "1"}
    assert doc["B", ["x"]] == {"b": "2"}


def test_read_sections():
    doc = ini("[A]\n[ B ]\n[]\n[C\n[A]\n")
    assert doc.read_sections() == ["A", "B", "A"]
    assert "a" in doc
    assert "C" not in doc


def test_read_comments():
    doc = ini("; top\n[A]\n# in a\nx=1 ; tail\n[B]\n;; in b\n")
    assert doc.read_comments() == ["top", "in a", "tail", "in b"]
    assert doc.read_comments("A") == ["in a", "tail"]
    assert doc.read_comments("B") == ["in b"]


def test_section_brackets_required():
    doc = ini("[A]\nx=1\n", require_section_brackets=True)
    assert doc.read_value("[A]", "x") == "1"
    assert doc.read_value("A", "x") == ""
    assert "[A]" in doc
    assert "A" not in doc
    assert doc.read_sections() == ["[A]"]


def test_malformed_lines_are_invisible():
    doc = ini("[A\ngarbage line\n[A]\n= nokey\nx=1\n")
    assert doc.read_sections() == ["A"]
    assert doc.read_keys_values("A") == {"x": "1"}


def test_typed_access():
    doc = ini("[S]\nn = 42\nf = yes\nl = a, b ,c\n")
    assert doc.get("S", "n", int) == 42
    assert doc.get("S", "missing", int, -1) == -1
    assert doc.get("S", "f", bool) is True
    assert doc.getbool("S", "n") is False
    assert doc.getbool("S", "missing") is None
    assert doc.get("S", "l", list) == ["a", "b", "c"]
    assert doc.getlist("S", "missing") == []


def test_cr_only_lines_stay_apart():
    doc = ini("; settings\r[A]\rjunk line\rx=1\r")
    assert doc.read_comments() == ["settings"]
    assert doc.read_sections() == ["A"]
    assert doc.read_value("A", "x") == "1"
