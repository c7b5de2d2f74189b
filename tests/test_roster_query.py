"""
Unit tests for the roster query engine.

Tests search matching, exact role/type filters, the three sort orders and
the jersey number comparator's handling of missing numbers.
"""
import unittest
from typing import List

from roster_manager.models import RosterEntry, QueryCriteria, SortKey
from roster_manager.services.roster_query import (
    query, matches_criteria, sort_entries, compare_jersey_numbers
)


def entry(name: str, role: str = "Player", position: str = "", number: str = "", side: str = "") -> RosterEntry:
    return RosterEntry(name=name, role=role, position=position, number=number, side=side)


def numbers(entries: List[RosterEntry]) -> List[str]:
    return [e.number for e in entries]


def names(entries: List[RosterEntry]) -> List[str]:
    return [e.name for e in entries]


class TestRosterQuery(unittest.TestCase):
    """Test cases for query()."""

    def setUp(self) -> None:
        """Set up a small mixed roster."""
        self.brown = entry("A.J. Brown", "Player", "Wide Receiver", "11", "Offense")
        self.sirianni = entry("Nick Sirianni", "Coach", "Head Coach", "N/A", "N/A")
        self.hurts = entry("Jalen Hurts", "Player", "Quarterback", "1", "Offense")
        self.carter = entry("Jalen Carter", "Player", "Defensive Tackle", "98", "Defense")
        self.fangio = entry("Vic Fangio", "Coach", "Defensive Coordinator", "N/A", "Defense")
        self.roseman = entry("Howie Roseman", "Staff", "General Manager", "N/A", "N/A")
        self.roster = [self.brown, self.sirianni, self.hurts, self.carter, self.fangio, self.roseman]

    def test_default_criteria_returns_everything_alphabetically(self) -> None:
        """Test that no search and no filters keeps every entry."""
        result = query(self.roster, QueryCriteria())

        self.assertEqual(len(result), len(self.roster))
        self.assertEqual(names(result), sorted(names(self.roster)))

    def test_none_criteria_uses_defaults(self) -> None:
        """Test that omitting criteria behaves like QueryCriteria()."""
        self.assertEqual(query(self.roster), query(self.roster, QueryCriteria()))

    def test_each_sort_key_keeps_all_entries(self) -> None:
        """Test that sorting alone never drops entries."""
        for key in SortKey:
            with self.subTest(sort_key=key):
                result = query(self.roster, QueryCriteria(sort_key=key))
                self.assertEqual(len(result), len(self.roster))
                self.assertCountEqual(result, self.roster)

    def test_role_filter_end_to_end(self) -> None:
        """Test that a Player role filter keeps only players."""
        result = query([self.brown, self.sirianni], QueryCriteria(role_filter="Player"))

        self.assertEqual(result, [self.brown])

    def test_role_filter_is_exact_not_substring(self) -> None:
        """Test that a partial role value matches nothing."""
        self.assertEqual(query(self.roster, QueryCriteria(role_filter="Play")), [])
        self.assertEqual(query(self.roster, QueryCriteria(role_filter="player")), [])

    def test_type_filter_is_exact(self) -> None:
        """Test that the type filter compares the whole value."""
        result = query(self.roster, QueryCriteria(type_filter="Defense"))
        self.assertEqual(names(result), ["Jalen Carter", "Vic Fangio"])

        self.assertEqual(query(self.roster, QueryCriteria(type_filter="Def")), [])

    def test_filters_combine(self) -> None:
        """Test that role and type filters must both hold."""
        criteria = QueryCriteria(role_filter="Coach", type_filter="Defense")
        self.assertEqual(query(self.roster, criteria), [self.fangio])

    def test_all_labels_in_criteria_mean_no_filter(self) -> None:
        """Test that "All ..." dropdown labels match every entry when passed directly."""
        criteria = QueryCriteria(role_filter="All Roles", type_filter="All Types")
        self.assertEqual(query([self.brown], criteria), [self.brown])

        for label in ("", "All", "All Roles", "All Types"):
            with self.subTest(label=label):
                criteria = QueryCriteria(role_filter=label, type_filter=label)
                self.assertEqual(len(query(self.roster, criteria)), len(self.roster))

    def test_search_name_is_case_insensitive(self) -> None:
        """Test that lower-case search text matches names."""
        result = query(self.roster, QueryCriteria(search_text="jalen"))
        self.assertEqual(names(result), ["Jalen Carter", "Jalen Hurts"])

        result = query(self.roster, QueryCriteria(search_text="HURTS"))
        self.assertEqual(result, [self.hurts])

    def test_search_number_is_exact(self) -> None:
        """Test that numbers must match exactly, not as substrings."""
        self.assertEqual(query([self.hurts], QueryCriteria(search_text="1")), [self.hurts])
        self.assertEqual(query([self.hurts], QueryCriteria(search_text="01")), [])
        self.assertEqual(query([self.carter], QueryCriteria(search_text="9")), [])

    def test_search_position_substring(self) -> None:
        """Test that search text matches inside positions."""
        result = query(self.roster, QueryCriteria(search_text="coord"))
        self.assertEqual(result, [self.fangio])

        result = query(self.roster, QueryCriteria(search_text="receiver"))
        self.assertEqual(result, [self.brown])

    def test_search_text_is_trimmed(self) -> None:
        """Test that surrounding whitespace in the search box is ignored."""
        result = query(self.roster, QueryCriteria(search_text="  11 "))
        self.assertEqual(result, [self.brown])

    def test_search_with_filters(self) -> None:
        """Test that search combines with the role filter."""
        criteria = QueryCriteria(search_text="coach", role_filter="Coach")
        self.assertEqual(query(self.roster, criteria), [self.sirianni])

    def test_no_match_returns_empty_list(self) -> None:
        """Test that unmatched searches return an empty list rather than failing."""
        self.assertEqual(query(self.roster, QueryCriteria(search_text="zzz")), [])
        self.assertEqual(query([], QueryCriteria(search_text="zzz")), [])

    def test_query_is_idempotent(self) -> None:
        """Test that re-applying criteria to their own output changes nothing."""
        for key in SortKey:
            criteria = QueryCriteria(search_text="a", type_filter="Offense", sort_key=key)
            with self.subTest(sort_key=key):
                once = query(self.roster, criteria)
                self.assertEqual(query(once, criteria), once)

    def test_query_does_not_mutate_input(self) -> None:
        """Test that the input list is left untouched."""
        original = list(self.roster)
        result = query(self.roster, QueryCriteria(sort_key=SortKey.JERSEY_NUMBER))

        self.assertEqual(self.roster, original)
        self.assertIsNot(result, self.roster)

    def test_results_are_the_same_entry_objects(self) -> None:
        """Test that the query selects references instead of copying entries."""
        result = query(self.roster, QueryCriteria(role_filter="Staff"))
        self.assertIs(result[0], self.roseman)

    def test_matches_criteria_direct(self) -> None:
        """Test the filter predicate on its own."""
        self.assertTrue(matches_criteria(self.hurts, QueryCriteria()))
        self.assertTrue(matches_criteria(self.hurts, QueryCriteria(search_text="quarter")))
        self.assertFalse(matches_criteria(self.hurts, QueryCriteria(role_filter="Coach")))


class TestRosterSorting(unittest.TestCase):
    """Test cases for sort orders and the jersey number comparator."""

    def test_jersey_numbers_sort_numerically_with_unknowns_last(self) -> None:
        """Test numeric order with empty and N/A numbers at the end."""
        roster = [entry(f"P{i}", number=n) for i, n in enumerate(["10", "2", "N/A", "9", ""])]

        result = sort_entries(roster, SortKey.JERSEY_NUMBER)

        self.assertEqual(numbers(result), ["2", "9", "10", "N/A", ""])

    def test_unknown_sentinel_is_case_insensitive(self) -> None:
        """Test that N/a and n/a count as unknown numbers."""
        roster = [entry("A", number="N/a"), entry("B", number="n/a"), entry("C", number="5")]

        result = sort_entries(roster, SortKey.JERSEY_NUMBER)

        self.assertEqual(names(result), ["C", "A", "B"])

    def test_unknown_numbers_keep_input_order(self) -> None:
        """Test that the sort is stable among entries without numbers."""
        roster = [entry("Zed", number=""), entry("Amy", number="N/A"), entry("Bob", number="N/a")]

        result = sort_entries(roster, SortKey.JERSEY_NUMBER)

        self.assertEqual(names(result), ["Zed", "Amy", "Bob"])

    def test_equal_numbers_keep_input_order(self) -> None:
        """Test stability for duplicate jersey numbers."""
        roster = [entry("Quez Watkins", number="16"), entry("Tanner McKee", number="16"), entry("X", number="1")]

        result = sort_entries(roster, SortKey.JERSEY_NUMBER)

        self.assertEqual(names(result), ["X", "Quez Watkins", "Tanner McKee"])

    def test_zero_is_a_known_number(self) -> None:
        """Test that jersey 0 sorts first rather than with unknowns."""
        roster = [entry("A", number="N/A"), entry("B", number="3"), entry("C", number="0")]

        self.assertEqual(numbers(sort_entries(roster, SortKey.JERSEY_NUMBER)), ["0", "3", "N/A"])

    def test_non_integer_number_ties_with_numbers(self) -> None:
        """Pin current behavior: a non-integer number compares equal to numbers."""
        a = entry("A", number="12a")
        b = entry("B", number="3")

        self.assertEqual(compare_jersey_numbers(a, b), 0)
        self.assertEqual(compare_jersey_numbers(b, a), 0)
        self.assertEqual(names(sort_entries([a, b], SortKey.JERSEY_NUMBER)), ["A", "B"])
        self.assertEqual(names(sort_entries([b, a], SortKey.JERSEY_NUMBER)), ["B", "A"])

    def test_non_integer_number_is_not_unknown(self) -> None:
        """Pin current behavior: a non-integer number still sorts before N/A."""
        odd = entry("Odd", number="12a")
        unknown = entry("Unknown", number="N/A")

        self.assertEqual(compare_jersey_numbers(odd, unknown), -1)
        self.assertEqual(names(sort_entries([unknown, odd], SortKey.JERSEY_NUMBER)), ["Odd", "Unknown"])

    def test_out_of_range_number_ties_with_numbers(self) -> None:
        """Test that numbers beyond the 32-bit range behave like non-integers."""
        huge = entry("Huge", number="2147483648")
        five = entry("Five", number="5")

        self.assertEqual(compare_jersey_numbers(huge, five), 0)
        self.assertEqual(compare_jersey_numbers(five, huge), 0)
        self.assertEqual(compare_jersey_numbers(entry("Max", number="2147483647"), five), 1)
        self.assertEqual(compare_jersey_numbers(entry("Min", number="-2147483648"), five), -1)
        self.assertEqual(compare_jersey_numbers(entry("Low", number="-2147483649"), five), 0)

    def test_compare_jersey_numbers_signs(self) -> None:
        """Test comparator results for the basic cases."""
        self.assertLess(compare_jersey_numbers(entry("A", number="9"), entry("B", number="10")), 0)
        self.assertGreater(compare_jersey_numbers(entry("A", number="10"), entry("B", number="9")), 0)
        self.assertEqual(compare_jersey_numbers(entry("A", number="7"), entry("B", number="7")), 0)
        self.assertEqual(compare_jersey_numbers(entry("A", number=""), entry("B", number="N/A")), 0)
        self.assertEqual(compare_jersey_numbers(entry("A", number=""), entry("B", number="1")), 1)

    def test_alphabetical_sort_is_case_sensitive(self) -> None:
        """Test that names compare as plain strings, so capitals sort first."""
        roster = [entry("Zach"), entry("Amy"), entry("amy")]

        result = sort_entries(roster, SortKey.ALPHABETICAL)

        self.assertEqual(names(result), ["Amy", "Zach", "amy"])

    def test_position_sort(self) -> None:
        """Test ascending order by position with stable ties."""
        roster = [
            entry("A", position="Safety"),
            entry("B", position="Cornerback"),
            entry("C", position="Linebacker"),
            entry("D", position="Cornerback"),
        ]

        result = sort_entries(roster, SortKey.POSITION)

        self.assertEqual(names(result), ["B", "D", "C", "A"])


if __name__ == "__main__":
    unittest.main()
