import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

from kakariuke import cli
from kakariuke.cli import build_arg_parser, main, run_batch
from kakariuke.pipeline import DependencyParser
from tests.morphemes import FakeAnalyzer, TARO_SENTENCE, m, NOUN, SYMBOL


class TestCli(unittest.TestCase):
    def test_arguments(self):
        args = build_arg_parser().parse_args(["parse", "猫が鳴く。", "--format", "conllu", "--profile"])
        self.assertEqual(args.command, "parse")
        self.assertEqual(args.format, "conllu")
        self.assertTrue(args.profile)

    def test_missing_config(self):
        self.assertEqual(main(["--config", "/nonexistent.yaml", "sample"]), 1)

    def test_batch(self):
        analyzer = FakeAnalyzer({"太郎は花子にプレゼントをあげた。": TARO_SENTENCE})
        parser = DependencyParser(analyzer=analyzer)
        parser.initialize()

        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp) / "sentences.txt"
            input_path.write_text("太郎は花子にプレゼントをあげた。\n\n未知の文\n", encoding="utf-8")
            output_path = Path(tmp) / "out" / "sentences.jsonl"

            written = run_batch(parser, input_path, output_path)

            lines = output_path.read_text(encoding="utf-8").splitlines()

        # the unknown sentence yields an empty (but valid) result
        self.assertEqual(written, 2)
        first = json.loads(lines[0])
        self.assertEqual([d["to"] for d in first["dependencies"]], [3, 3, 3])
        self.assertEqual(json.loads(lines[1])["bunsetsu"], [])

    def test_batch_skips_failures(self):
        parser = DependencyParser(analyzer=FakeAnalyzer(), require_non_empty=True)
        parser.initialize()

        with tempfile.TemporaryDirectory() as tmp:
            input_path = Path(tmp) / "in.txt"
            input_path.write_text("何か\n", encoding="utf-8")
            output_path = Path(tmp) / "in.jsonl"
            # FakeAnalyzer returns no morphemes for unknown text -> EmptyInputError, logged and skipped
            self.assertEqual(run_batch(parser, input_path, output_path), 0)


class TestTerminalOutput(unittest.TestCase):
    def setUp(self):
        self.buffer = io.StringIO()
        patcher = mock.patch.object(cli, "console", Console(file=self.buffer, width=200, color_system=None))
        patcher.start()
        self.addCleanup(patcher.stop)
        self.parser = DependencyParser(analyzer=FakeAnalyzer())

    def test_bracketed_text_is_printed_literally(self):
        result = self.parser.parse_morphemes([m("猫", NOUN), m("[/b]", SYMBOL)])

        cli.print_result(result)
        cli.print_tree(result)

        output = self.buffer.getvalue()
        self.assertIn("猫[/b]", output)
        self.assertIn("[記号]", output)

    def test_tree_format(self):
        args = build_arg_parser().parse_args(["parse", "太郎は花子にプレゼントをあげた。", "--format", "tree"])
        cli.emit(self.parser.parse_morphemes(TARO_SENTENCE), args)

        lines = self.buffer.getvalue().splitlines()
        self.assertEqual(lines[0].strip(), "あげた。")
        self.assertIn("太郎は (は)", lines[1])
        self.assertIn("プレゼントを (を)", lines[3])

    def test_tree_of_empty_result(self):
        cli.print_tree(self.parser.parse_morphemes([]))
        self.assertIn("(empty)", self.buffer.getvalue())

    def test_tree_format_saves_default_export(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "taro.json"
            args = build_arg_parser().parse_args(["parse", "x", "--format", "tree", "--output", str(out)])
            cli.emit(self.parser.parse_morphemes(TARO_SENTENCE), args, default_format="json")
            saved = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(len(saved["dependencies"]), 3)


if __name__ == '__main__':
    unittest.main()
