from pairlink.systems.match_rules import (
    IDENTITY_RULE,
    PAIRED_TAG_RULE,
    parse_tagged_symbol,
    rule_for_level,
    tagged_symbol,
)


def test_identity_rule_pairs_equal_symbols():
    assert IDENTITY_RULE.matches("tile_004", "tile_004")
    assert not IDENTITY_RULE.matches("tile_004", "tile_005")
    assert not IDENTITY_RULE.matches("", "")
    assert IDENTITY_RULE.group_key("tile_004") == "tile_004"


def test_paired_tag_rule_needs_same_base_and_opposite_suffix():
    assert PAIRED_TAG_RULE.matches("pair007_1", "pair007_2")
    assert PAIRED_TAG_RULE.matches("pair007_2", "pair007_1")
    assert not PAIRED_TAG_RULE.matches("pair007_1", "pair009_1")
    assert not PAIRED_TAG_RULE.matches("pair007_1", "pair009_2")
    assert not PAIRED_TAG_RULE.matches("pair007_1", "pair007_1")
    assert not PAIRED_TAG_RULE.matches("tile_001", "tile_001")


def test_parse_tagged_symbol():
    assert parse_tagged_symbol("pair012_2") == ("pair012", "2")
    assert parse_tagged_symbol(tagged_symbol("pair003", "1")) == ("pair003", "1")
    assert parse_tagged_symbol("tile_001") is None
    assert parse_tagged_symbol("pair012_3") is None
    assert parse_tagged_symbol("pair012") is None
    assert parse_tagged_symbol("") is None


def test_special_level_uses_tagged_rule():
    assert rule_for_level(9) is PAIRED_TAG_RULE
    for level in (1, 8, 10, 11):
        assert rule_for_level(level) is IDENTITY_RULE
