from util.text_width import display_width, ellipsize, pad_display, trim_display, wrap_display


def test_display_width_counts_wide_characters():
    assert display_width("abc") == 3
    assert display_width("日本") == 4
    assert display_width("") == 0


def test_trim_never_splits_a_wide_character():
    assert trim_display("日本語", 3) == "日"
    assert trim_display("abc", 10) == "abc"


def test_ellipsize_and_pad():
    assert ellipsize("abcdef", 4) == "abc…"
    assert ellipsize("abc", 4) == "abc"
    assert ellipsize("abc", 0) == ""
    assert pad_display("ab", 4) == "ab  "
    assert display_width(pad_display("日本語です", 5)) == 5


def test_wrap_display_respects_width_and_newlines():
    assert wrap_display("abcdef", 4) == ["abcd", "ef"]
    assert wrap_display("ab\ncd", 10) == ["ab", "cd"]
    assert wrap_display("", 5) == [""]
