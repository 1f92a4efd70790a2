"""InstaPrompt command line.

    python -m instaprompt serve
    python -m instaprompt add "Review" --content "Review {FILENAME} around line {LINE}"
    python -m instaprompt list
    python -m instaprompt insert <id> --file src/main.py --line 42
    python -m instaprompt delete <id>
"""

import argparse
import asyncio
import logging
import os
import sys

from core import Document, EditorSnapshot
from instaprompt.config import get_server_host, get_server_port, get_task_directory
from instaprompt.database import get_db, init_db
from instaprompt.database import prompts as prompt_db
from instaprompt.editor import EditorState
from instaprompt.utilities import setup_logging
from template_resolver import (
    ResolverRegistry,
    TemplateResolver,
    VariableResolutionCancelled,
    prompt_for_variable,
    register_builtin_resolvers,
)

logger = logging.getLogger(__name__)


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from instaprompt.api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    with get_db() as conn:
        prompts = prompt_db.list_prompts(conn, category=args.category)
    for prompt in prompts:
        category = f" [{prompt.category}]" if prompt.category else ""
        print(f"{prompt.id}  {prompt.name}{category}")
    return 0


def _cmd_add(args: argparse.Namespace) -> int:
    content = args.content if args.content is not None else sys.stdin.read()
    with get_db() as conn:
        prompt = prompt_db.create_prompt(conn, args.name, content, category=args.category)
    print(prompt.id)
    return 0


def _cmd_delete(args: argparse.Namespace) -> int:
    with get_db() as conn:
        deleted = prompt_db.delete_prompt(conn, args.prompt_id)
    if not deleted:
        print(f"Prompt not found: {args.prompt_id}", file=sys.stderr)
        return 1
    return 0


def _build_snapshot(args: argparse.Namespace) -> EditorSnapshot:
    """Editor context described by the insert command's flags."""
    visible = [Document(path=os.path.abspath(p)) for p in args.visible]
    active = None
    if args.file:
        active = Document(
            path=os.path.abspath(args.file),
            selection=args.selection,
            cursor_line=max(args.line - 1, 0),
        )
    return EditorSnapshot(active=active, visible=tuple(visible), clipboard=args.clipboard)


def _cmd_insert(args: argparse.Namespace) -> int:
    with get_db() as conn:
        prompt = prompt_db.get_prompt(conn, args.prompt_id)
    if prompt is None:
        print(f"Prompt not found: {args.prompt_id}", file=sys.stderr)
        return 1

    registry = ResolverRegistry()
    register_builtin_resolvers(
        registry, EditorState(_build_snapshot(args)), task_directory=get_task_directory()
    )
    resolver = TemplateResolver(registry)

    try:
        content = asyncio.run(resolver.resolve(prompt.content, prompt_for_variable))
    except VariableResolutionCancelled as e:
        logger.debug("Insert cancelled at %s", e.variable_name)
        return 1

    print(content)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="instaprompt", description="Saved prompts with {VARIABLE} substitution")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=get_server_host())
    serve.add_argument("--port", type=int, default=get_server_port())
    serve.set_defaults(func=_cmd_serve)

    list_cmd = subparsers.add_parser("list", help="List saved prompts")
    list_cmd.add_argument("--category")
    list_cmd.set_defaults(func=_cmd_list)

    add = subparsers.add_parser("add", help="Save a prompt (content from --content or stdin)")
    add.add_argument("name")
    add.add_argument("--content")
    add.add_argument("--category")
    add.set_defaults(func=_cmd_add)

    delete = subparsers.add_parser("delete", help="Delete a saved prompt")
    delete.add_argument("prompt_id")
    delete.set_defaults(func=_cmd_delete)

    insert = subparsers.add_parser("insert", help="Print a prompt with its variables filled in")
    insert.add_argument("prompt_id")
    insert.add_argument("--file", help="Active document")
    insert.add_argument("--line", type=int, default=1, help="Cursor line, 1-indexed")
    insert.add_argument("--selection", default="")
    insert.add_argument("--clipboard", default="")
    insert.add_argument("--visible", nargs="*", default=[], help="Other visible documents")
    insert.set_defaults(func=_cmd_insert)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    init_db()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
