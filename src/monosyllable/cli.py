"""CLI entrypoint for monosyllable: subcommand dispatcher."""

import argparse
import logging
import sys
from pathlib import Path


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by all subcommands."""
    parser.add_argument("corpus", type=Path,
                        help="Syllabified IPA corpus: JSON object of word -> 'syl|syl'")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log skipped syllables and other debug detail")
    parser.add_argument("--no-cache", action="store_true", default=False,
                        help="Disable file-based caching of the built graph")


def _add_sample_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the sample subcommand."""
    parser.add_argument("-n", "--count", type=int, default=10,
                        help="Number of syllables to generate (default: 10)")
    parser.add_argument("--palette", default=None,
                        help="Space-separated phones allowed in output, e.g. 'b u n i d t' (default: any)")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for reproducible output")
    parser.add_argument("--max-phones", type=int, default=None,
                        help="Give up on a syllable after this many phones (default: 2x longest in corpus)")


def _add_graph_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the graph subcommand."""
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write DOT to this file instead of stdout")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="monosyllable",
        description="Learn syllable structure from IPA transcriptions and sample new syllables",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sample_parser = subparsers.add_parser(
        "sample",
        help="Generate random syllables",
        description="Generate syllables by random walks over the corpus' sonority graph",
    )
    _add_shared_args(sample_parser)
    _add_sample_args(sample_parser)

    graph_parser = subparsers.add_parser(
        "graph",
        help="Export the sonority graph as Graphviz DOT",
        description="Render the onset/vowel/coda transition graph as DOT text",
    )
    _add_shared_args(graph_parser)
    _add_graph_args(graph_parser)

    stats_parser = subparsers.add_parser(
        "stats",
        help="Summarize the sonority graph",
        description="Print per-partition phone and edge counts",
    )
    _add_shared_args(stats_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _parse_palette(palette: str | None) -> list[str] | None:
    if palette is None:
        return None
    phones = palette.split()
    if not phones:
        print("Error: --palette needs at least one phone", file=sys.stderr)
        sys.exit(1)
    return phones


def _check_corpus(path: Path) -> None:
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        sys.exit(1)


def _run_sample(args: argparse.Namespace) -> None:
    """Run the sampling pipeline and print one syllable per line."""
    from monosyllable.sonority import process

    _check_corpus(args.corpus)
    if args.count < 0:
        print("Error: --count must be non-negative", file=sys.stderr)
        sys.exit(1)
    if args.max_phones is not None and args.max_phones < 1:
        print("Error: --max-phones must be at least 1", file=sys.stderr)
        sys.exit(1)

    run = process(
        corpus_path=args.corpus,
        count=args.count,
        palette=_parse_palette(args.palette),
        seed=args.seed,
        max_phones=args.max_phones,
        use_cache=not args.no_cache,
    )

    for outcome in run.outcomes:
        if outcome.ok:
            print(str(outcome))
        else:
            print(f"# {outcome}")


def _run_graph(args: argparse.Namespace) -> None:
    """Write the graph as DOT text."""
    from monosyllable.sonority import load_graph
    from monosyllable.sonority.view import graph_to_dot

    _check_corpus(args.corpus)
    dot = graph_to_dot(load_graph(args.corpus, use_cache=not args.no_cache))

    if args.output is None:
        sys.stdout.write(dot)
        return
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(dot, encoding="utf-8")
    logging.getLogger("monosyllable.graph").info(f"Wrote {args.output}")


def _run_stats(args: argparse.Namespace) -> None:
    """Print per-partition counts."""
    from monosyllable.sonority import load_graph
    from monosyllable.types import Partition

    _check_corpus(args.corpus)
    graph = load_graph(args.corpus, use_cache=not args.no_cache)

    print(f"Syllables: {graph.syllable_count}")
    print(f"Longest syllable: {graph.longest_syllable} phones")
    for partition in Partition:
        table = graph.table(partition)
        phones = sum(1 for source in table if source.is_phone)
        edges = sum(len(out) for out in table.values())
        print(f"{partition.name.lower():8} {phones:4} phones {edges:5} edges")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    try:
        if args.command == "sample":
            _run_sample(args)
        elif args.command == "graph":
            _run_graph(args)
        elif args.command == "stats":
            _run_stats(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
