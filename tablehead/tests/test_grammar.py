import pytest

from tablehead.grammar import is_synthesized_spec, parse_column_spec


@pytest.mark.parametrize(
    "spec, custom, header, key",
    [
        ("grp: LABELS[app]", "grp", "LABELS", "app"),
        ("GROUP:LABELS[platform.io/nodegroup]", "GROUP", "LABELS", "platform.io/nodegroup"),
        ("LABELS[app]", "", "LABELS", "app"),
        ("  spaced  :   LABELS[k]", "spaced", "LABELS", "k"),
        ("LABELS[]", "", "LABELS", ""),
        ("ANNOTATIONS[a]", "", "ANNOTATIONS", "a"),
        ("LABELS[a:b]", "", "LABELS", "a:b"),
        ("x: LABELS[a][b]", "x", "LABELS[a]", "b"),
    ],
)
def test_parse_synthesized_specs(spec, custom, header, key):
    parsed = parse_column_spec(spec)
    assert parsed is not None
    assert parsed.raw == spec
    assert parsed.custom_name == custom
    assert parsed.header_name == header
    assert parsed.key == key


@pytest.mark.parametrize(
    "spec",
    ["NAME", "", "LABELS", "LABELS[app", "LABELS]app[", "LABELS[app] ", "LABELS[app]\n"],
)
def test_plain_column_references(spec):
    assert parse_column_spec(spec) is None
    assert not is_synthesized_spec(spec)


def test_only_labels_header_is_supported():
    assert parse_column_spec("grp: LABELS[app]").is_supported
    assert not parse_column_spec("grp: ANNOTATIONS[app]").is_supported
    assert not parse_column_spec("grp: labels[app]").is_supported
