import pytest

from ga4channel import constants, errors
from ga4channel.channels import CHANNEL_RULES, get_rule
from ga4channel.matchers import EMPTY_MATCHERS


def test_rule_set_has_nineteen_channels_in_evaluation_order():
    names = [rule.name for rule in CHANNEL_RULES]

    assert len(CHANNEL_RULES) == 19
    assert names == list(constants.CHANNEL_NAMES)
    assert len(set(names)) == 19


def test_unassigned_is_last_and_always_matches():
    last = CHANNEL_RULES[-1]

    assert last.name == constants.UNASSIGNED
    assert last.predicate is None
    assert last.matches("", "", "", EMPTY_MATCHERS)
    assert all(rule.predicate is not None for rule in CHANNEL_RULES[:-1])


def test_category_channels_have_target_category():
    assert get_rule(constants.PAID_SEARCH).target_category == constants.SOURCE_CATEGORY_SEARCH
    assert get_rule(constants.ORGANIC_SHOPPING).target_category == constants.SOURCE_CATEGORY_SHOPPING
    assert get_rule(constants.PAID_VIDEO).target_category == constants.SOURCE_CATEGORY_VIDEO
    assert get_rule(constants.ORGANIC_SOCIAL).target_category == constants.SOURCE_CATEGORY_SOCIAL
    assert get_rule(constants.EMAIL).target_category is None


def test_rules_carry_description_and_condition():
    for rule in CHANNEL_RULES:
        assert rule.description
        assert rule.condition


def test_get_rule_unknown_channel():
    with pytest.raises(errors.UnknownChannel):
        get_rule("paid search")
