"""
Constants and configuration defaults for ide_jump.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "ide_jump"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Jump from your editor to the same file, line and column in an IDE"

CONFIG_DIR: Final[Path] = Path.home() / ".ide_jump"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

CONFIG_ENV_VAR: Final[str] = "IDE_JUMP_CONFIG"
DEFAULT_IDE_ENV_VAR: Final[str] = "IDE_JUMP_DEFAULT_IDE"

SLASH_PREFIX: Final[str] = "/"

DEFAULT_IDE: Final[str] = "idea"
DEFAULT_LINE: Final[int] = 1
DEFAULT_COLUMN: Final[int] = 0

# Display name -> command identifier. Order is the listing order in menus.
DEFAULT_IDES: Final[dict] = {
    "IntelliJ IDEA": "idea",
    "PyCharm": "pycharm",
    "WebStorm": "webstorm",
    "PhpStorm": "phpstorm",
    "GoLand": "goland",
    "CLion": "clion",
    "RubyMine": "rubymine",
    "Rider": "rider",
    "DataGrip": "datagrip",
    "DataSpell": "dataspell",
    "RustRover": "rustrover",
    "Aqua": "aqua",
    "Android Studio": "studio",
}

# Tried in order after PATH lookup. Expanded for ~ and $VARS.
DEFAULT_SEARCH_DIRS: Final[list] = [
    "~/.local/share/JetBrains/Toolbox/scripts",
    "~/Library/Application Support/JetBrains/Toolbox/scripts",
    "$LOCALAPPDATA/JetBrains/Toolbox/scripts",
    "~/.local/bin",
    "~/bin",
    "/usr/local/bin",
    "/usr/bin",
    "/snap/bin",
    "/opt/homebrew/bin",
    "/var/lib/flatpak/exports/bin",
    "~/.local/share/flatpak/exports/bin",
]

VCS_MARKERS: Final[tuple] = (".git", ".hg", ".svn", ".bzr", "_darcs", ".fslckout")

PROJECT_MARKERS: Final[tuple] = (
    ".idea",
    ".projectile",
    ".project",
    "pyproject.toml",
    "setup.py",
    "package.json",
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "go.mod",
    "Cargo.toml",
    "CMakeLists.txt",
    "Makefile",
)

GIT_TIMEOUT_SECONDS: Final[int] = 5

HELP_TEXT: Final[str] = """
Available Commands:
  /open          - Open a file in the IDE at a line and column
  /project       - Open the project root in the IDE
  /ides          - List configured IDEs
  /default       - Show or set the default IDE
  /which         - Show which executable an IDE resolves to
  /override      - Pin an IDE to an absolute executable path
  /help          - Show this help message
"""
