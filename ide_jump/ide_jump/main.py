"""
Main entry point for ide_jump.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, DEFAULT_COLUMN, DEFAULT_LINE, HELP_TEXT


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME.replace("_", "-"),
        description=APP_DESCRIPTION,
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="File to open in the IDE"
    )

    parser.add_argument(
        "-l", "--line",
        type=int,
        default=DEFAULT_LINE,
        help="1-based line number (default: 1)"
    )

    parser.add_argument(
        "--column",
        type=int,
        default=DEFAULT_COLUMN,
        help="0-based column number (default: 0)"
    )

    parser.add_argument(
        "-i", "--ide",
        type=str,
        help="IDE display name or command identifier (default: configured default IDE)"
    )

    parser.add_argument(
        "-r", "--project-root",
        type=str,
        help="Project root to open first (default: discovered)"
    )

    parser.add_argument(
        "-p", "--project",
        action="store_true",
        help="Open the project only, without a file"
    )

    parser.add_argument(
        "-s", "--select",
        action="store_true",
        help="Pick the IDE from an interactive menu"
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        help="Execute a single slash command and exit (e.g. '/ides')"
    )

    parser.add_argument(
        "--completion",
        type=str,
        choices=["bash", "zsh", "fish"],
        help="Generate shell completion script"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log resolution and the assembled IDE command line to stderr"
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Route log records through Rich on stderr."""
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )


def generate_completion(shell: str) -> str:
    """Generate shell completion script."""
    if shell == "bash":
        return '''
_ide_jump_completions() {
    local opts="--line --column --ide --project-root --project --select --command --config --debug --version --help"
    if [[ "${COMP_WORDS[COMP_CWORD]}" == -* ]]; then
        COMPREPLY=($(compgen -W "$opts" -- "${COMP_WORDS[COMP_CWORD]}"))
    else
        COMPREPLY=($(compgen -f -- "${COMP_WORDS[COMP_CWORD]}"))
    fi
}
complete -F _ide_jump_completions ide-jump
'''
    elif shell == "zsh":
        return '''
#compdef ide-jump
_arguments \\
    '(-l --line)'{-l,--line}'[1-based line]:line:' \\
    '--column[0-based column]:column:' \\
    '(-i --ide)'{-i,--ide}'[IDE name]:ide:' \\
    '(-r --project-root)'{-r,--project-root}'[project root]:dir:_files -/' \\
    '(-p --project)'{-p,--project}'[open project only]' \\
    '(-s --select)'{-s,--select}'[pick IDE interactively]' \\
    '(-c --command)'{-c,--command}'[slash command]:command:' \\
    '--config[config file]:file:_files' \\
    '--debug[debug logging]' \\
    '1:file:_files'
'''
    elif shell == "fish":
        return '''
complete -c ide-jump -s l -l line -d '1-based line' -x
complete -c ide-jump -l column -d '0-based column' -x
complete -c ide-jump -s i -l ide -d 'IDE name' -x
complete -c ide-jump -s r -l project-root -d 'Project root' -r -a '(__fish_complete_directories)'
complete -c ide-jump -s p -l project -d 'Open project only'
complete -c ide-jump -s s -l select -d 'Pick IDE interactively'
complete -c ide-jump -s c -l command -d 'Slash command' -x
complete -c ide-jump -l config -d 'Config file' -r
complete -c ide-jump -l debug -d 'Debug logging'
'''
    return ""


def run_command(command: str, config, renderer) -> int:
    """Execute a single slash command and render its result."""
    from .command_system import CommandParser, get_command_registry

    parsed = CommandParser().parse(command)
    if parsed.type == "empty":
        renderer.print_error("No command given")
        return 1

    result = get_command_registry().execute(parsed.command, parsed.args, config=config)
    renderer.render_result(result, default_ide=config.default_ide)
    return 0 if result.is_success else 1


def run_jump(args: argparse.Namespace, config, renderer) -> int:
    """Jump to the requested file or project and render the outcome."""
    from .command_system import CommandResult
    from .errors import JumpError
    from .jump import jump_to_file, open_project

    ide = args.ide or config.default_ide
    if args.select:
        from .rich_ui.menu import select_ide_interactive

        ide = select_ide_interactive(config.ide.ides, current=ide)
        if ide is None:
            renderer.print_warning("No IDE selected", title="Cancelled")
            return 1

    try:
        if args.project:
            launch = open_project(
                project_root=args.project_root,
                ide=ide,
                file_path=args.file,
                ide_config=config.ide,
            )
        else:
            launch = jump_to_file(
                args.file,
                line=args.line,
                column=args.column,
                ide=ide,
                project_root=args.project_root,
                ide_config=config.ide,
            )
    except JumpError as e:
        result = CommandResult.from_jump_error(e)
    except ValueError as e:
        result = CommandResult.error(f"Invalid arguments: {e}")
    else:
        result = CommandResult.from_launch(launch)

    renderer.render_result(result)
    return 0 if result.is_success else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)

    if args.completion:
        print(generate_completion(args.completion))
        return 0

    from .config import get_config
    from .rich_ui.renderer import get_renderer

    config = get_config(Path(args.config) if args.config else None)
    renderer = get_renderer()

    try:
        if args.command:
            return run_command(args.command, config, renderer)
        return run_jump(args, config, renderer)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
