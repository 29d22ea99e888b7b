"""
Test the main driver that you would run with `python -m forth`.
"""

import os
import pathlib
import subprocess
import sys
import tempfile
import unittest

project_root = pathlib.Path(__file__).parents[2]


def run_forth(*args: str, stdin: str = '') -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, '-m', 'forth', *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=project_root,
        timeout=30,
    )


class TestBatchMode(unittest.TestCase):
    def test_prints_final_stack(self) -> None:
        process = run_forth(stdin=': sq dup * ;\n3 sq 4 sq\n+\n')
        self.assertEqual(0, process.returncode)
        self.assertEqual('25\n', process.stdout)

    def test_error_sets_exit_status(self) -> None:
        process = run_forth(stdin='1 2\n0 /\n3\n')
        self.assertEqual(1, process.returncode)
        self.assertIn('line 2: Division by zero', process.stdout)
        self.assertTrue(process.stdout.endswith('1 2 3\n'))

    def test_endless_expansion_is_reported(self) -> None:
        process = run_forth(stdin='1\n: foo foo ; foo\n2\n')
        self.assertEqual(1, process.returncode)
        self.assertIn(
            'line 2: Word expansion does not terminate', process.stdout
        )
        self.assertNotIn('internal error', process.stdout)
        self.assertTrue(process.stdout.endswith('1 2\n'))

    def test_debug_prints_every_line(self) -> None:
        process = run_forth('--debug', stdin='1\n2\n')
        self.assertIn('1: 1\n2: 1 2\n', process.stdout)

    def test_file_argument(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, 'program.fs')
            with open(path, 'w') as program:
                program.write('1 2 swap\n')
            process = run_forth(path)
        self.assertEqual('2 1\n', process.stdout)

    def test_verbose_logs_json(self) -> None:
        process = run_forth('--verbose', stdin='1\n')
        self.assertEqual('1\n', process.stdout)
        self.assertIn('"level_name": "DEBUG"', process.stderr)
        self.assertIn("evaluating '1'", process.stderr)
