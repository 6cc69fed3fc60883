import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree
from tqdm import tqdm

from kakariuke.config import load_config
from kakariuke.core.data_structures import ParseResult
from kakariuke.core.exceptions import KakariukeError
from kakariuke.export import EXPORT_FORMATS, export, write_export
from kakariuke.hierarchy import build_hierarchy
from kakariuke.pipeline import DependencyParser
from kakariuke.profiler import DependencyProfiler

logger = logging.getLogger(__name__)
console = Console()

TERMINAL_FORMATS = ("table", "tree")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kakariuke",
        description="Rule-based Japanese bunsetsu dependency parser",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--debug", action="store_true", help="Verbose logging (shows fired rules)")

    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse one sentence")
    p_parse.add_argument("text", type=str)
    _add_output_args(p_parse)

    p_sample = sub.add_parser("sample", help="Parse a random sample sentence from the config")
    _add_output_args(p_sample)

    p_batch = sub.add_parser("batch", help="Parse a file with one sentence per line into JSON Lines")
    p_batch.add_argument("input", type=str)
    p_batch.add_argument("--output", type=str, default=None)

    return parser


def _add_output_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", choices=TERMINAL_FORMATS + EXPORT_FORMATS, default="table")
    p.add_argument("--output", type=str, default=None, help="Write the export to this file")
    p.add_argument("--profile", action="store_true", help="Print tree statistics")


def print_result(result: ParseResult) -> None:
    """Bunsetsu table + dependency table."""
    b_table = Table(title=f"文節: {escape(result.text)}")
    b_table.add_column("ID", justify="right")
    b_table.add_column("Surface")
    b_table.add_column("Head")
    b_table.add_column("POS")
    b_table.add_column("Morphemes")

    for b in result.bunsetsu:
        b_table.add_row(
            str(b.id),
            escape(b.surface),
            escape(b.head.surface),
            b.head.pos.value,
            escape(" ".join(f"{t.surface}[{t.pos.value}]" for t in b.tokens)),
        )
    console.print(b_table)

    d_table = Table(title="係り受け")
    d_table.add_column("From")
    d_table.add_column("To")
    d_table.add_column("Label")
    for dep in result.dependencies:
        d_table.add_row(
            escape(f"{dep.from_}: {result.bunsetsu[dep.from_].surface}"),
            escape(f"{dep.to}: {result.bunsetsu[dep.to].surface}"),
            escape(dep.label) if dep.label else "-",
        )
    console.print(d_table)


def print_tree(result: ParseResult) -> None:
    """Dependents nested under their governors, edge labels dimmed."""
    root = build_hierarchy(result.bunsetsu, result.dependencies)
    if root is None:
        console.print("[dim](empty)[/dim]")
        return

    def node_label(node) -> str:
        text = f"[bold]{escape(node.surface)}[/bold]" if node.is_virtual else escape(node.surface)
        if node.label:
            text += f" [dim]({escape(node.label)})[/dim]"
        return text

    tree = Tree(node_label(root))
    stack = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        for child in node.children:
            stack.append((child, branch.add(node_label(child))))
    console.print(tree)


def emit(result: ParseResult, args, default_format: str = "json") -> None:
    if args.output:
        fmt = default_format if args.format in TERMINAL_FORMATS else args.format
        path = write_export(result, args.output, fmt)
        console.print(f"[green]Saved {fmt} to {escape(str(path))}[/green]")
    elif args.format == "table":
        print_result(result)
    elif args.format == "tree":
        print_tree(result)
    else:
        console.print(export(result, args.format), markup=False, highlight=False)

    if args.profile:
        console.print_json(json.dumps(DependencyProfiler().profile(result), ensure_ascii=False))


def run_batch(parser: DependencyParser, input_path: Path, output_path: Path) -> int:
    lines = [line.strip() for line in input_path.read_text(encoding="utf-8").splitlines()]
    lines = [line for line in lines if line]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    written = 0

    with open(output_path, "w", encoding="utf-8") as f:
        for line in tqdm(lines, desc=input_path.name):
            try:
                result = parser.parse(line)
            except KakariukeError as e:
                logger.error(f"Error parsing '{line}': {e}")
                continue
            f.write(json.dumps(result.to_dict(), ensure_ascii=False) + "\n")
            written += 1

    logger.info(f"Wrote {written}/{len(lines)} results to {output_path}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    log_cfg = cfg["logging"]
    logging.basicConfig(
        level=logging.DEBUG if args.debug else log_cfg.get("level", "INFO"),
        format=log_cfg.get("format"),
    )

    parser = DependencyParser.from_config(cfg)

    try:
        parser.initialize()

        if args.command == "parse":
            emit(parser.parse(args.text), args, cfg["export"]["format"])
        elif args.command == "sample":
            if not cfg["samples"]:
                raise KakariukeError("No sample sentences configured")
            text = random.choice(cfg["samples"])
            console.print(f"[bold]{escape(text)}[/bold]")
            emit(parser.parse(text), args, cfg["export"]["format"])
        elif args.command == "batch":
            input_path = Path(args.input)
            if args.output:
                output_path = Path(args.output)
            else:
                output_path = Path(cfg["export"]["output_dir"]) / f"{input_path.stem}.jsonl"
            run_batch(parser, input_path, output_path)
    except (KakariukeError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
