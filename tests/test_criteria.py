import unittest

from pydantic import ValidationError

from models import UNBOUNDED, MatchCriteria


class TestMatchCriteria(unittest.TestCase):
    def test_defaults_match_everything_unbounded(self) -> None:
        criteria = MatchCriteria()
        self.assertEqual(criteria.tag, "")
        self.assertFalse(criteria.has_attribute_filter)
        self.assertFalse(criteria.is_bounded)
        self.assertFalse(criteria.is_satisfied(10_000))

    def test_legacy_unbounded_count_becomes_none(self) -> None:
        criteria = MatchCriteria(limit=UNBOUNDED)
        self.assertIsNone(criteria.limit)

    def test_none_strings_are_treated_as_empty(self) -> None:
        criteria = MatchCriteria(tag=None, attr=None, attr_value=None)
        self.assertEqual((criteria.tag, criteria.attr, criteria.attr_value), ("", "", ""))

    def test_zero_and_negative_limits_are_rejected(self) -> None:
        for bad in (0, -2):
            with self.assertRaises(ValidationError):
                MatchCriteria(limit=bad)

    def test_unknown_fields_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            MatchCriteria(count=3)

    def test_is_satisfied_once_limit_reached(self) -> None:
        criteria = MatchCriteria(limit=2)
        self.assertFalse(criteria.is_satisfied(1))
        self.assertTrue(criteria.is_satisfied(2))

    def test_accepts_pair_with_optional_fields(self) -> None:
        self.assertTrue(MatchCriteria(attr="id").accepts_pair("id", "anything"))
        self.assertFalse(MatchCriteria(attr="id").accepts_pair("class", "x"))
        self.assertTrue(MatchCriteria(attr_value="b").accepts_pair("data-x", "b"))
        self.assertFalse(MatchCriteria(attr="id", attr_value="a").accepts_pair("id", "b"))

    def test_value_only_filter_counts_as_attribute_filter(self) -> None:
        self.assertTrue(MatchCriteria(attr_value="x").has_attribute_filter)

    def test_criteria_are_immutable(self) -> None:
        criteria = MatchCriteria(tag="p")
        with self.assertRaises(ValidationError):
            criteria.tag = "div"
