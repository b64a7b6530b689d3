# """
#  Compiled-in packaging declaration for the framework bridge.
#  Kept apart from the models so the literal can be read without pulling in
#  the loader or its YAML dependency.
#  """

# Directories and fully qualified paths, anchored at the project root.
ROOT_EXCLUSIONS: tuple[str, ...] = (
    "vendor",
    "tests",
    "storage",
    ".idea",
    ".git",
)

# File names, excluded wherever they appear in the package tree.
NAME_EXCLUSIONS: tuple[str, ...] = (
    ".gitignore",
    ".env",
    ".env.example",
    ".gitkeep",
    ".htaccess",
    "readme.md",
    "versions.json",
    ".php_cs.cache",
    "composer.json",
    "composer.lock",
)

# Framework command-line entry point.
EXECUTABLES: tuple[str, ...] = (
    "artisan",
)

# Key wrapping a rooted entry in the on-disk `ignore` list.
BASE_PATH_KEY = "base_path"
