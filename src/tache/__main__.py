"""Command line entry point: render a template file to stdout."""

import argparse
import json
from pathlib import Path
import sys

from tache.context import PartialFileLoader
from tache.context import VariantContext
from tache.core import RenderConfig
from tache.core import TemplateRenderError
from tache.project_info import get_project_info
from tache.template import Renderer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    info = get_project_info()
    parser = argparse.ArgumentParser(prog="tache", description=info.description)
    parser.add_argument("template", type=Path, help="Mustache template file")
    parser.add_argument("--data", type=Path, help="JSON file with the root scope")
    parser.add_argument(
        "--partials",
        type=Path,
        help="Directory of <name>.mustache partials (default: template directory)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Exit non-zero on template errors"
    )
    parser.add_argument(
        "--version", action="version", version=f"{info.name} v{info.version}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Render the template named on the command line."""
    args = build_parser().parse_args(argv)

    template = args.template.read_text(encoding="utf-8")
    data = {}
    if args.data:
        data = json.loads(args.data.read_text(encoding="utf-8"))

    loader = PartialFileLoader(args.partials or args.template.parent)
    renderer = Renderer(RenderConfig(strict=args.strict))
    try:
        output = renderer.render(template, VariantContext(data, loader))
    except TemplateRenderError as e:
        sys.stdout.write(e.output)
        print(f"\ntache: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    if renderer.error():
        print(
            f"tache: warning: {renderer.error()} (position {renderer.error_pos()})",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
