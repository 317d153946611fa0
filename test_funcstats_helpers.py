"""
Test suite for funcstats_helpers and funcstats_measurements.
Tests line and TODO counting, and the measurement model.
"""

import unittest

from funcstats.funcstats_helpers import count_lines, count_todos, is_test_file, is_vendor_dir
from funcstats.funcstats_measurements import (
    FunctionStats, FunctionStatsList, MeasurementKind,
    MeasurementNotSetError, UnknownMeasurementError, parse_measurement_list,
)


class TestCountLines(unittest.TestCase):
    """Test line counting with ignore sets."""

    def test_empty_string_is_one_line(self):
        self.assertEqual(count_lines(''), 1)

    def test_no_ignores_counts_blank_lines(self):
        self.assertEqual(count_lines('a\n\n}'), 3)

    def test_ignored_lines_are_stripped(self):
        self.assertEqual(count_lines('a\n\n  }\t\nb', '', '}'), 2)

    def test_comment_markers(self):
        text = '// x\n//\n/*\n  */\n'
        self.assertEqual(count_lines(text, '', '//', '/*', '*/'), 1)

    def test_ignore_values_are_stripped(self):
        self.assertEqual(count_lines('}\nx', ' } '), 1)


class TestCountTodos(unittest.TestCase):
    """Test TODO tag detection."""

    def test_case_sensitivity(self):
        self.assertEqual(count_todos('TODO: fix this', 'todo and Fixme, HACKish'), (1, 3))

    def test_non_letters_separate_words(self):
        self.assertEqual(count_todos('x_TODO2NOTE'), (2, 2))

    def test_no_texts(self):
        self.assertEqual(count_todos(), (0, 0))

    def test_unicode_letters_join_words(self):
        self.assertEqual(count_todos('ÄTODO'), (0, 0))

    def test_case_insensitive_is_superset(self):
        sensitive, insensitive = count_todos('Bug bug BUG wtf asap Issue')
        self.assertEqual(sensitive, 1)
        self.assertEqual(insensitive, 6)


class TestFileHelpers(unittest.TestCase):

    def test_test_file(self):
        self.assertTrue(is_test_file('pkg/b_test.go'))
        self.assertFalse(is_test_file('pkg/b.go'))

    def test_vendor_dir(self):
        self.assertTrue(is_vendor_dir('vendor'))
        self.assertTrue(is_vendor_dir('a/vendor/'))
        self.assertFalse(is_vendor_dir('vendored'))


class TestParseMeasurementList(unittest.TestCase):
    """Test the comma-separated measurement parser."""

    def test_valid_list(self):
        self.assertEqual(parse_measurement_list('Lines, Complexity'),
                         [MeasurementKind.LINES, MeasurementKind.COMPLEXITY])

    def test_all_kinds(self):
        names = ','.join(kind.value for kind in MeasurementKind)
        self.assertEqual(parse_measurement_list(names), list(MeasurementKind))

    def test_wrong_case_is_rejected(self):
        with self.assertRaises(UnknownMeasurementError) as cm:
            parse_measurement_list('lines')
        self.assertEqual(cm.exception.name, 'lines')
        self.assertIn("'lines'", str(cm.exception))

    def test_first_unknown_is_reported(self):
        with self.assertRaises(UnknownMeasurementError) as cm:
            parse_measurement_list('Lines,Bogus,Other')
        self.assertEqual(cm.exception.name, 'Bogus')

    def test_empty_is_an_error(self):
        with self.assertRaises(UnknownMeasurementError):
            parse_measurement_list('')
        with self.assertRaises(ValueError):
            parse_measurement_list(' , ')


class TestFunctionStats(unittest.TestCase):
    """Test the per-function record."""

    def test_unset_measurement(self):
        stats = FunctionStats('Foo', 'a.go:1:1')
        with self.assertRaises(MeasurementNotSetError):
            stats.get(MeasurementKind.LINES)
        with self.assertRaises(KeyError):
            stats.get(MeasurementKind.NESTING)

    def test_last_write_wins(self):
        stats = FunctionStats('Foo', 'a.go:1:1')
        stats.set(MeasurementKind.LINES, 3)
        stats.set(MeasurementKind.LINES, 5)
        self.assertEqual(stats.get(MeasurementKind.LINES), 5.0)
        self.assertIsInstance(stats.get(MeasurementKind.LINES), float)

    def test_display_name(self):
        self.assertEqual(FunctionStats('Foo', 'a.go:1:1').display_name, 'Foo')
        self.assertEqual(FunctionStats('Foo', 'a.go:1:1', receiver='*T').display_name, '(*T).Foo')

    def test_to_dict(self):
        stats = FunctionStats('Foo', 'a.go:3:1', receiver='T')
        stats.set(MeasurementKind.LINES, 4)
        stats.set(MeasurementKind.COMPLEXITY, 2)
        self.assertEqual(stats.to_dict([MeasurementKind.COMPLEXITY]), {
            'name': 'Foo',
            'receiver': 'T',
            'location': 'a.go:3:1',
            'measurements': {'Complexity': 2.0},
        })


class TestFunctionStatsList(unittest.TestCase):
    """Test sorting."""

    def _stats(self, name, lines, location='a.go:1:1'):
        stats = FunctionStats(name, location)
        stats.set(MeasurementKind.LINES, lines)
        return stats

    def test_descending_with_name_tie_break(self):
        stats_list = FunctionStatsList(MeasurementKind.LINES, [
            self._stats('b', 3),
            self._stats('c', 10),
            self._stats('a', 3),
            self._stats('d', 1),
        ])
        stats_list.sort()
        self.assertEqual([s.name for s in stats_list.stats], ['c', 'a', 'b', 'd'])

    def test_location_breaks_name_ties(self):
        stats_list = FunctionStatsList(MeasurementKind.LINES, [
            self._stats('f', 2, 'b.go:1:1'),
            self._stats('f', 2, 'a.go:1:1'),
        ])
        stats_list.sort()
        self.assertEqual([s.location for s in stats_list.stats], ['a.go:1:1', 'b.go:1:1'])

    def test_sorting_by_unset_measurement_fails(self):
        stats_list = FunctionStatsList(MeasurementKind.NESTING, [self._stats('a', 1)])
        with self.assertRaises(MeasurementNotSetError):
            stats_list.sort()


if __name__ == '__main__':
    unittest.main()
