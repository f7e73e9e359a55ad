"""Project-wide constants, enums, and the bundled default ignore list."""

from __future__ import annotations

from enum import StrEnum


class OutputFormat(StrEnum):
    """Valid formats for printing search results."""

    TEXT = "text"
    JSON = "json"


# Pattern used when no include patterns are configured.
MATCH_ALL_PATTERN = "**/*"

GIT_DIR_NAME = ".git"
GIT_DIR_PATTERN = ".git/**"
GIT_EXCLUDE_PATH = (".git", "info", "exclude")
GITDIR_PREFIX = "gitdir:"
# Anchored to the search root so nested `.git` pointer files are unaffected.
GIT_POINTER_PATTERN = "/.git"

GITIGNORE_FILE = ".gitignore"
PACKSCAN_IGNORE_FILE = ".packscanignore"

DEFAULT_OUTPUT_FILE = "packscan-output.xml"

# CLI exit codes
EXIT_OK = 0
EXIT_SEARCH = 1
EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_PERMISSION = 4
EXIT_INTERRUPT = 130

# Config keys
CONFIG_INCLUDE = "include"
CONFIG_IGNORE = "ignore"
CONFIG_OUTPUT = "output"
CONFIG_USE_GITIGNORE = "use_gitignore"
CONFIG_USE_DEFAULT_PATTERNS = "use_default_patterns"
CONFIG_CUSTOM_PATTERNS = "custom_patterns"
CONFIG_FILE_PATH = "file_path"
CONFIG_INCLUDE_EMPTY_DIRECTORIES = "include_empty_directories"

# Gitignore-style patterns excluded unless default patterns are disabled.
DEFAULT_IGNORE_LIST: tuple[str, ...] = (
    # Version control
    GIT_DIR_PATTERN,
    ".hg/**",
    ".hgignore",
    ".svn/**",
    # Dependency directories
    "**/node_modules/**",
    "**/bower_components/**",
    "**/jspm_packages/**",
    "vendor/**",
    "**/.bundle/**",
    "**/.gradle/**",
    "target/**",
    # Logs
    "logs/**",
    "**/*.log",
    "**/npm-debug.log*",
    "**/yarn-debug.log*",
    "**/yarn-error.log*",
    # Runtime data
    "pids/**",
    "*.pid",
    "*.seed",
    "*.pid.lock",
    # Coverage
    "lib-cov/**",
    "coverage/**",
    "htmlcov/**",
    ".nyc_output/**",
    ".coverage",
    # Caches
    ".grunt/**",
    ".lock-wscript",
    ".eslintcache",
    ".rollup.cache/**",
    ".webpack.cache/**",
    ".parcel-cache/**",
    ".sass-cache/**",
    "*.cache",
    "**/.npm/**",
    ".node_repl_history",
    "*.tgz",
    "**/.yarn/**",
    "**/.yarn-integrity",
    # Environment
    ".env",
    # Framework build output
    ".next/**",
    ".nuxt/**",
    ".vuepress/dist/**",
    ".serverless/**",
    ".fusebox/**",
    ".dynamodb/**",
    "build/**",
    "dist/**",
    "out/**",
    # OS
    "**/.DS_Store",
    "**/Thumbs.db",
    # Editors
    ".idea/**",
    ".vscode/**",
    "**/*.swp",
    "**/*.swo",
    "**/*.swn",
    "**/*.bak",
    # Temporary files
    "tmp/**",
    ".temp/**",
    # Previous outputs
    "**/packscan-output.*",
    # Lock files
    "**/package-lock.json",
    "**/yarn.lock",
    "**/pnpm-lock.yaml",
    "**/bun.lockb",
    "**/bun.lock",
    "**/Cargo.lock",
    "**/composer.lock",
    "**/Gemfile.lock",
    "**/go.sum",
    "**/mix.lock",
    "**/Pipfile.lock",
    "**/poetry.lock",
    "**/uv.lock",
    # Python
    "**/__pycache__/**",
    "**/*.py[cod]",
    "**/venv/**",
    "**/.venv/**",
    "**/.tox/**",
    "**/.nox/**",
    "**/.pytest_cache/**",
    "**/.mypy_cache/**",
    "**/.ruff_cache/**",
    "**/.ipynb_checkpoints/**",
    "**/*.egg-info/**",
)
