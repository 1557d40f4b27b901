import argparse
import asyncio
import json
import os
import sys

from mathstream.config import MathStreamConfig


def read_document(args) -> str:
    """Collect the whole document for the dump modes."""
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()

    if args.sse:
        from mathstream.stream.messages import EventKind
        from mathstream.stream.sse_source import parse_sse_line

        parts = []
        for line in sys.stdin:
            event = parse_sse_line(line)
            if event is None:
                continue
            if event.kind == EventKind.CONTENT:
                parts.append(event.content)
            elif event.kind == EventKind.DONE:
                break
        return "".join(parts)

    from mathstream.stream.sample import SAMPLE_MARKDOWN
    return SAMPLE_MARKDOWN


def dump(args, console) -> None:
    from mathstream.render.builder import ElementBuilder
    from mathstream.render.renderer import TreeRenderer
    from mathstream.tree.hast import parse_markdown
    from mathstream.tree.nodes import node_to_dict

    tree = parse_markdown(read_document(args))
    if args.dump_tree:
        data = node_to_dict(tree)
    else:
        data = TreeRenderer(ElementBuilder()).render(tree).to_dict()
    console.print_json(json.dumps(data, ensure_ascii=False))


def main():
    parser = argparse.ArgumentParser(
        description="mathstream - live terminal rendering of streamed Markdown with math"
    )
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--file", default=None, metavar="PATH",
        help="Stream a Markdown file instead of the built-in demo",
    )
    source_group.add_argument(
        "--sse", action="store_true",
        help="Read a Server-Sent Events stream from stdin",
    )
    parser.add_argument(
        "--interval", nargs=2, type=float, default=None, metavar=("MIN", "MAX"),
        help="Delay range between demo chunks in seconds (default: 0.05 0.15)",
    )
    parser.add_argument(
        "--chunk", nargs=2, type=int, default=None, metavar=("MIN", "MAX"),
        help="Characters per demo chunk (default: 1 3)",
    )
    parser.add_argument(
        "--refresh", type=int, default=10,
        help="Live display refreshes per second (default: 10)",
    )
    parser.add_argument(
        "--code-theme", default="monokai",
        help="Pygments theme for code blocks (default: monokai)",
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Don't print the progress footer at the end",
    )
    dump_group = parser.add_mutually_exclusive_group()
    dump_group.add_argument(
        "--dump-tree", action="store_true",
        help="Print the parsed document tree as JSON and exit",
    )
    dump_group.add_argument(
        "--dump-view", action="store_true",
        help="Print the rendered view tree as JSON and exit",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    config = MathStreamConfig(
        refresh_per_second=args.refresh,
        code_theme=args.code_theme,
        show_progress=not args.no_progress,
        log_level=args.log_level,
    )
    if args.interval:
        config.interval_min, config.interval_max = args.interval
    if args.chunk:
        config.chunk_min, config.chunk_max = args.chunk

    from mathstream.logging import configure_logging
    from mathstream.ui.console import console
    configure_logging(config.log_level, console=console)

    if args.file and not os.path.exists(args.file):
        print(f"Error: file not found: {args.file}")
        sys.exit(1)

    if args.dump_tree or args.dump_view:
        dump(args, console)
        return

    # Create source
    if args.file:
        from mathstream.stream.file_source import FileChunkSource
        source = FileChunkSource(args.file, config)
    elif args.sse:
        from mathstream.stream.sse_source import SSEChunkSource
        source = SSEChunkSource()
    else:
        from mathstream.stream.demo_source import DemoChunkSource
        source = DemoChunkSource(config=config)

    from mathstream.ui.renderer import VisualRenderer
    renderer = VisualRenderer(
        console,
        show_progress=config.show_progress,
        refresh_per_second=config.refresh_per_second,
        code_theme=config.code_theme,
    )

    from mathstream.app import MathStreamApp
    app = MathStreamApp(source, renderer)
    asyncio.run(app.run())


if __name__ == "__main__":
    main()
