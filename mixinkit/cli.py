"""Command line for generating and deleting mixin files."""

from __future__ import annotations

import argparse
from pathlib import Path

from .generator import Asset, MixinProject
from .settings import Settings, load_settings


def _parse_asset(text: str) -> Asset:
    package, slash, name = text.rstrip("/").rpartition("/")
    name = name.split(".", 1)[0]
    if not slash or not name:
        raise argparse.ArgumentTypeError(f"not an asset path: {text}")
    return Asset(name, package)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mixinkit", description="Manage TypeScript mixin files.")
    parser.add_argument("--project-dir", type=Path, default=Path("."))
    parser.add_argument("--config", type=Path, help="INI file with project settings")
    parser.add_argument("--content-dir", type=Path)
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="generate mixin files from a template")
    generate.add_argument("--template", type=Path, required=True)
    generate.add_argument("assets", nargs="+", type=_parse_asset)

    delete = commands.add_parser("delete", help="delete mixin files and their imports")
    delete.add_argument("--yes", action="store_true", help="do not ask for confirmation")
    delete.add_argument("assets", nargs="+", type=_parse_asset)
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings(args.config) if args.config else Settings()
    project = MixinProject(
        args.project_dir,
        getattr(args, "template", Path("Mixin.ts")),
        settings,
        args.content_dir,
    )

    if args.command == "generate":
        report = project.generate_all(args.assets)
        print(report.format("\n\n") + "\n\n")
        return 0

    if not args.yes:
        answer = input("确定要删除这些Mixin文件吗？ [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("删除操作已取消")
            return 0
    report = project.delete_all(args.assets)
    print(report.format("\n"))
    return 0