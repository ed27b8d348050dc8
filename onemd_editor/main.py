"""Command-line entry point.

Every storage operation the editor front end calls is exposed as a subcommand,
so the notebook tree can be inspected and scripted without the GUI:

    onemd-editor seed
    onemd-editor notebooks
    onemd-editor new-note "<notebook path>" "Meeting notes"
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from onemd_editor.core.errors import StorageError
from onemd_editor.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from onemd_editor.services.markdown_renderer import MarkdownRenderer
from onemd_editor.settings import ROOT_ENV_VAR, SettingsKeys, get_str, open_settings
from onemd_editor.storage import NotebookStorage
from onemd_editor.storage.filesystem import translate_os_errors


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="onemd-editor", description="Local markdown notebooks")
    p.add_argument("--root", type=Path, default=None, help="Directory that holds the notebooks")
    p.add_argument("--save-root", action="store_true", help="Remember --root for later runs")
    p.add_argument("-v", "--verbose", action="store_true", help="Log INFO messages to stderr")

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("root", help="Print the notebooks root directory")
    sub.add_parser("seed", help="Create the sample notebook if missing")
    sub.add_parser("notebooks", help="List notebooks")

    sp = sub.add_parser("notes", help="List notes of a notebook")
    sp.add_argument("notebook_path")

    sp = sub.add_parser("read", help="Print a note's markdown")
    sp.add_argument("note_path")

    sp = sub.add_parser("save", help="Overwrite a note's markdown (from --file or stdin)")
    sp.add_argument("note_path")
    sp.add_argument("--file", type=Path, default=None)

    sp = sub.add_parser("new-notebook", help="Create a notebook")
    sp.add_argument("name")

    sp = sub.add_parser("new-note", help="Create a note inside a notebook")
    sp.add_argument("notebook_path")
    sp.add_argument("name")

    sp = sub.add_parser("add-image", help="Copy an image into a note's images/ folder")
    sp.add_argument("note_path")
    sp.add_argument("file", type=Path)
    sp.add_argument("--name", default=None, help="Stored file name (default: the file's own name)")

    sp = sub.add_parser("render", help="Print a note as an HTML page")
    sp.add_argument("note_path")

    return p


def configured_root(args: argparse.Namespace) -> Path | None:
    """--root, then ONEMD_EDITOR_ROOT, then a root remembered in QSettings.

    None leaves the choice to RootResolver (env var or platform default).
    """
    if args.root is not None:
        return args.root
    if os.environ.get(ROOT_ENV_VAR, "").strip():
        return None
    stored = get_str(open_settings(), SettingsKeys.STORAGE_ROOT, "").strip()
    return Path(stored) if stored else None


def _print_json(value) -> None:
    print(json.dumps(value, ensure_ascii=False, indent=2))


def run(args: argparse.Namespace, storage: NotebookStorage) -> None:
    cmd = args.command

    if cmd == "root":
        print(storage.root)
    elif cmd == "seed":
        storage.ensure_demo_data()
    elif cmd == "notebooks":
        _print_json([nb.to_dict() for nb in storage.list_notebooks()])
    elif cmd == "notes":
        _print_json([n.to_dict() for n in storage.list_notes(args.notebook_path)])
    elif cmd == "read":
        sys.stdout.write(storage.read_note(args.note_path))
    elif cmd == "save":
        if args.file is not None:
            with translate_os_errors("read input file", args.file):
                content = args.file.read_bytes().decode("utf-8")
        else:
            with translate_os_errors("read stdin", Path("<stdin>")):
                content = sys.stdin.buffer.read().decode("utf-8")
        storage.save_note(args.note_path, content)
    elif cmd == "new-notebook":
        _print_json(storage.create_notebook(args.name).to_dict())
    elif cmd == "new-note":
        _print_json(storage.create_note(args.notebook_path, args.name).to_dict())
    elif cmd == "add-image":
        with translate_os_errors("read image", args.file):
            data = args.file.read_bytes()
        print(storage.save_image(args.note_path, args.name or args.file.name, data))
    elif cmd == "render":
        text = storage.read_note(args.note_path)
        renderer = MarkdownRenderer(title=Path(args.note_path).name)
        sys.stdout.write(renderer.render_page(text, note_path=args.note_path))
    else:  # pragma: no cover
        raise ValueError(f"Unknown command: {cmd}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    install_global_exception_hooks()
    log.info("Command %s, SID=%s", args.command, SESSION_ID)

    root = configured_root(args)
    if args.save_root and args.root is not None:
        open_settings().setValue(SettingsKeys.STORAGE_ROOT, str(args.root.absolute()))
        log.info("Root remembered: %s", args.root.absolute())
    elif args.save_root:
        log.warning("--save-root ignored: no --root given")

    storage = NotebookStorage(root)
    try:
        run(args, storage)
    except StorageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
