"""
Test suite for funcstats_runner.
Tests file selection, directory traversal, error handling and sorting.
"""

import io
import os
import re
import tempfile
import unittest
from contextlib import redirect_stderr

from funcstats.funcstats_config import FuncStatsConfig
from funcstats.funcstats_measurements import MeasurementKind as K
from funcstats.funcstats_runner import AnalysisError, analyze_dir, analyze_file, do


SHORT = 'package a\n\nfunc Short() {}\n'
LONG = 'package a\n\nfunc Long() {\n\tx := 1\n\ty := 2\n\t_ = x + y\n}\n'


class RunnerTestCase(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, relpath, contents):
        path = os.path.join(self.root, relpath)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(contents)
        return path

    def names(self, stats):
        return [s.name for s in stats]


class TestTestFiles(RunnerTestCase):
    """Test inclusion of _test.go files."""

    def setUp(self):
        super().setUp()
        self.write('a.go', 'package a\n\nvar X = 1\n')
        self.write('b_test.go', 'package a\n\nfunc TestB(t *testing.T) {}\n')

    def test_tests_excluded_by_default(self):
        self.assertEqual(do(FuncStatsConfig(), [self.root]), [])

    def test_tests_included(self):
        stats = do(FuncStatsConfig(include_tests=True), [self.root])
        self.assertEqual(self.names(stats), ['TestB'])


class TestFileSelection(RunnerTestCase):
    """Test single file analysis."""

    def test_non_go_file_is_skipped(self):
        path = self.write('notes.txt', SHORT)
        self.assertEqual(analyze_file(FuncStatsConfig(), path), [])

    def test_ignore_pattern(self):
        path = self.write('gen/model.go', SHORT)
        config = FuncStatsConfig(ignore=re.compile('gen/'))
        self.assertEqual(analyze_file(config, path), [])
        self.assertEqual(self.names(analyze_file(FuncStatsConfig(), path)), ['Short'])

    def test_syntax_error_is_skipped(self):
        self.write('bad.go', 'package a\n\nfunc {\n')
        self.write('good.go', SHORT)
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            stats = do(FuncStatsConfig(), [self.root])
        self.assertEqual(self.names(stats), ['Short'])
        self.assertIn('Error parsing %s' % os.path.join(self.root, 'bad.go'), stderr.getvalue())

    def test_missing_go_file_is_fatal(self):
        with self.assertRaises(AnalysisError):
            do(FuncStatsConfig(), [os.path.join(self.root, 'missing.go')])

    def test_location(self):
        path = self.write('a.go', SHORT)
        stats = do(FuncStatsConfig(), [path])
        self.assertEqual(stats[0].location, '%s:3:1' % path)


class TestDirectories(RunnerTestCase):
    """Test directory traversal."""

    def setUp(self):
        super().setUp()
        self.write('top.go', SHORT)
        self.write('sub/long.go', LONG)
        self.write('vendor/dep/dep.go', 'package dep\n\nfunc Dep() {}\n')

    def test_non_recursive(self):
        self.assertEqual(self.names(analyze_dir(FuncStatsConfig(), self.root)), ['Short'])

    def test_recursive_skips_vendor(self):
        stats = do(FuncStatsConfig(), [os.path.join(self.root, '...')])
        self.assertEqual(self.names(stats), ['Long', 'Short'])

    def test_recursive_with_vendor(self):
        stats = do(FuncStatsConfig(include_vendor=True), [os.path.join(self.root, '...')])
        self.assertEqual(sorted(self.names(stats)), ['Dep', 'Long', 'Short'])

    def test_unreadable_directory(self):
        with self.assertRaises(AnalysisError):
            analyze_dir(FuncStatsConfig(), os.path.join(self.root, 'nope'))
        with self.assertRaises(AnalysisError):
            do(FuncStatsConfig(), [os.path.join(self.root, 'nope', '...')])

    def test_paths_are_merged_and_sorted(self):
        stats = do(FuncStatsConfig(types=[K.LINES]), [
            os.path.join(self.root, 'top.go'),
            os.path.join(self.root, 'sub'),
        ])
        self.assertEqual(self.names(stats), ['Long', 'Short'])
        self.assertEqual(stats[0].get(K.LINES), 4)
        self.assertEqual(stats[1].get(K.LINES), 1)

    def test_sort_key_is_first_type(self):
        self.write('sub/nested.go', 'package a\n\nfunc Nested() {\n\tif true {\n\t\tif true {\n\t\t}\n\t}\n}\n')
        stats = do(FuncStatsConfig(types=[K.NESTING, K.LINES]), [os.path.join(self.root, '...')])
        self.assertEqual(self.names(stats), ['Nested', 'Long', 'Short'])

    def test_worker_processes_give_same_result(self):
        paths = [os.path.join(self.root, '...')]
        sequential = do(FuncStatsConfig(include_vendor=True), paths)
        parallel = do(FuncStatsConfig(include_vendor=True, processes=2), paths)
        self.assertEqual(parallel, sequential)


class TestInvariants(RunnerTestCase):
    """Test relations that hold between measurements of any function."""

    def test_measurement_relations(self):
        self.write('a.go', LONG)
        self.write('b.go', '''package a

// Todo list handler. todo: more
func (h *Handler) Serve(w Writer, r *Request) {
	// TODO: validate
	for _, item := range r.Items { // hack
		if item == nil || item.Empty() {
			continue
		}
		/* fixme:
		   multi-line */
		w.Write(item)
	}
}
''')
        stats = do(FuncStatsConfig(), [self.root])
        self.assertEqual(len(stats), 2)
        for s in stats:
            self.assertGreaterEqual(s.get(K.TOTAL_LEN), s.get(K.LEN))
            self.assertGreaterEqual(s.get(K.TOTAL_LINES), s.get(K.LINES))
            self.assertGreaterEqual(s.get(K.COMPLEXITY), 1)
            self.assertLessEqual(s.get(K.TODOS), s.get(K.TODOS_CASE_INSENSITIVE))

        serve = [s for s in stats if s.name == 'Serve'][0]
        self.assertEqual(serve.receiver, '*Handler')
        self.assertEqual(serve.get(K.TODOS), 1)
        self.assertEqual(serve.get(K.TODOS_CASE_INSENSITIVE), 5)
        self.assertEqual(serve.get(K.COMPLEXITY), 4)
        self.assertEqual(serve.get(K.VARIABLES), 1)


if __name__ == '__main__':
    unittest.main()
