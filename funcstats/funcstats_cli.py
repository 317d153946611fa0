"""
Command-line interface module for funcstats.

Contains the FuncStats CLI class and usage functions.
"""

import getopt
import re
import sys

from .funcstats_config import OUTPUT_FORMATS, FuncStatsConfig, set_config
from .funcstats_constants import DEFAULT_PATHS
from .funcstats_export import StatsExporter
from .funcstats_measurements import MeasurementKind, UnknownMeasurementError, parse_measurement_list
from .funcstats_runner import AnalysisError, do


def usage():
	print("""
Usage: funcstats [options] [path...]

Paths:
  file.go          Analyze a single file
  dir              Analyze the .go files directly inside dir
  dir/...          Analyze dir and all its subdirectories (default: ./...)

Options:
-t, --type TYPES       Comma-separated measurements, the first one is the sort key (default: Lines)
--top N                Show only the N highest ranked functions, 0 for all (default: 20)
--threshold X          Hide functions whose sort measurement is lower than X (default: 0)
--ignore REGEX         Skip files whose path matches REGEX
--ignore-func REGEX    Skip functions whose name matches REGEX
--include-tests        Include _test.go files
--include-vendor       Include vendor directories in recursive scans
-f, --format FORMAT    Output format: text, json or yaml (default: text)
-j, --processes N      Analyze files in N worker processes (default: 1)
-v, --verbose          Enable verbose output
-h, --help             Show this help message

Measurements:
  %s

Examples:
  funcstats ./...                                  # Longest functions of the module
  funcstats -t Complexity,Lines --top 10 ./...     # Ten most complex functions
  funcstats -t Todos --threshold 1 --include-tests pkg/...
""" % ', '.join(kind.value for kind in MeasurementKind), file=sys.stderr)


def print_usage(msg='', *params):
	"""Print an error message and the usage to stderr, then exit with status 1."""
	if msg:
		print((msg % params if params else msg) + '\n', file=sys.stderr)
	usage()
	sys.exit(1)


def _compile(option, pattern):
	try:
		return re.compile(pattern)
	except re.error as e:
		print_usage('Invalid %s regex %r: %s', option, pattern, e)


class FuncStats:
	def run(self, args_orig):
		config = FuncStatsConfig()
		try:
			optlist, args = getopt.gnu_getopt(args_orig, 'ht:f:j:v', [
				"help", "type=", "top=", "threshold=", "ignore=", "ignore-func=",
				"include-tests", "include-vendor", "format=", "processes=", "verbose"])
		except getopt.GetoptError as e:
			print_usage(str(e))

		for o, v in optlist:
			if o in ('-t', '--type'):
				try:
					config.types = parse_measurement_list(v)
				except UnknownMeasurementError as e:
					print_usage(str(e))
			elif o == '--top':
				config.top = self._int_option(o, v)
			elif o == '--threshold':
				try:
					config.threshold = float(v)
				except ValueError:
					print_usage('Invalid value for %s: %s', o, v)
			elif o == '--ignore':
				config.ignore = _compile(o, v)
			elif o == '--ignore-func':
				config.ignore_funcs = _compile(o, v)
			elif o == '--include-tests':
				config.include_tests = True
			elif o == '--include-vendor':
				config.include_vendor = True
			elif o in ('-f', '--format'):
				if v not in OUTPUT_FORMATS:
					print_usage('Invalid format %s, expected one of: %s', v, ', '.join(OUTPUT_FORMATS))
				config.output_format = v
			elif o in ('-j', '--processes'):
				config.processes = max(1, self._int_option(o, v))
			elif o in ('-v', '--verbose'):
				config.verbose = True
			elif o in ('-h', '--help'):
				usage()
				sys.exit()

		set_config(config)
		paths = args or DEFAULT_PATHS
		config.printf('Analyzing %s sorted by %s', ', '.join(paths), config.sort_type)

		try:
			stats = do(config, paths)
		except AnalysisError as e:
			print_usage(str(e))

		sys.stdout.write(StatsExporter(stats, config).render())
		return 0

	def _int_option(self, option, value):
		try:
			number = int(value)
		except ValueError:
			print_usage('Invalid value for %s: %s', option, value)
		if number < 0:
			print_usage('%s must not be negative, got: %d', option, number)
		return number


def main():
	sys.exit(FuncStats().run(sys.argv[1:]))


if __name__ == '__main__':
	main()
