import textwrap

import pytest

from mdcode.errors import MissingEndRegionError, RegionError
from mdcode.region import find_regions, outline, read_region, replace_region


def test_read_named_region_with_named_end(go_source):
    assert read_region(go_source, "body") == ('\tfmt.Println("hi")\n', True)


def test_read_falls_back_to_anonymous_end(go_source):
    assert read_region(go_source, "imports") == ('import "fmt"\n', True)


def test_read_missing_name_is_not_found(go_source):
    assert read_region(go_source, "missing") == (None, False)


def test_read_does_not_match_name_prefix():
    src = "// #region foobar\nx\n// #endregion\n"
    assert read_region(src, "foo") == (None, False)


def test_read_first_of_duplicate_names():
    src = "# #region x\none\n# #endregion\n# #region x\ntwo\n# #endregion\n"
    assert read_region(src, "x") == ("one\n", True)


def test_read_empty_region():
    assert read_region("// #region e\n// #endregion e\n", "e") == ("", True)


@pytest.mark.parametrize(
    "begin, end",
    [
        ("<!-- #region intro -->", "<!-- #endregion -->"),
        ("/* #region intro */", "/* #endregion intro */"),
        ("-- #region intro", "-- #endregion"),
        ("  //#region intro", "  //#endregion"),
        ("# #region intro", "# #endregion intro"),
    ],
)
def test_read_comment_styles(begin, end):
    src = f"head\n{begin}\nbody line\n{end}\ntail\n"
    assert read_region(src, "intro") == ("body line\n", True)


def test_read_crlf_markers():
    src = "// #region w\r\nwin\r\n// #endregion\r\n"
    assert read_region(src, "w") == ("win\r\n", True)


def test_marker_needs_comment_punctuation():
    src = "#region plain\nbody\n#endregion\n"
    # "#" is itself punctuation, so a bare "#region" line is not a marker
    assert read_region(src, "plain") == (None, False)


def test_empty_name_is_not_found():
    src = "// #region a\nbody\n// #endregion\n"
    assert read_region(src, "") == (None, False)
    assert replace_region(src, "", "x\n") == (src, False)


def test_replace_then_read_roundtrip(go_source):
    value = 'import (\n\t"fmt"\n\t"os"\n)\n'
    out, found = replace_region(go_source, "imports", value)
    assert found
    assert read_region(out, "imports") == (value, True)
    # Everything outside the region body is untouched.
    assert out == go_source.replace('import "fmt"\n', value)


def test_replace_keeps_marker_lines(go_source):
    out, _ = replace_region(go_source, "body", "")
    assert "\t// #region body\n\t// #endregion body\n" in out


def test_replace_missing_name_is_noop(go_source):
    out, found = replace_region(go_source, "missing", "x\n")
    assert found is False
    assert out == go_source


def test_replace_missing_terminator_is_noop():
    src = "// #region open\nbody\n"
    assert replace_region(src, "open", "new\n") == (src, False)


def test_outline_strips_all_bodies():
    src = textwrap.dedent(
        """\
        header
        // #region a
        A1
        A2
        // #endregion
        between
        # #region b
        B
        # #endregion b
        footer
        """
    )
    out, found = outline(src)
    assert found is True
    assert out == "header\n// #region a\n// #endregion\nbetween\n# #region b\n# #endregion b\nfooter\n"


def test_outline_without_regions():
    src = "nothing to see\n"
    assert outline(src) == (src, False)


def test_outline_missing_end_is_fatal():
    src = "// #region foo\nbody\n"
    with pytest.raises(MissingEndRegionError) as exc:
        outline(src)
    assert exc.value.name == "foo"
    assert exc.value.line == 1
    assert isinstance(exc.value, RegionError)


def test_outline_missing_end_after_good_region():
    src = "// #region a\nx\n// #endregion\n// #region b\ny\n"
    with pytest.raises(MissingEndRegionError) as exc:
        outline(src)
    assert exc.value.name == "b"
    assert exc.value.line == 4


def test_missing_end_policy_differs_between_lookup_and_outline():
    src = "// #region foo\nbody\n"
    assert read_region(src, "foo") == (None, False)
    assert replace_region(src, "foo", "x\n") == (src, False)
    with pytest.raises(MissingEndRegionError):
        outline(src)


def test_find_regions_in_order(go_source):
    names = [r.name for r in find_regions(go_source)]
    assert names == ["imports", "body"]
    first = next(iter(find_regions(go_source)))
    assert go_source[first.begin:first.end] == 'import "fmt"\n'
