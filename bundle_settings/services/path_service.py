import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union
from ..models.settings import PackagingSettings
from ..utils.exceptions import ResolutionError

def resolve(root: str, entry: str) -> str:
    """
    Resolve a configuration entry against a project root.

    Absolute entries are returned normalised. Relative entries are joined to
    ``root`` and normalised lexically; the filesystem is never consulted, so
    symlinks and missing paths are left as they are. ``root`` is checked
    either way.

    Raises:
        ResolutionError: If ``root`` is empty or relative, or ``entry`` is empty
    """
    if not entry:
        raise ResolutionError("Cannot resolve an empty entry", entry=entry)
    if not root:
        raise ResolutionError(f"No project root given for entry '{entry}'", entry=entry)
    if not os.path.isabs(root):
        raise ResolutionError(f"Project root must be absolute, got '{root}'", entry=entry)
    if os.path.isabs(entry):
        return os.path.normpath(entry)
    return os.path.normpath(os.path.join(root, entry))

@dataclass(frozen=True)
class ResolvedSettings:
    """Packaging settings bound to a concrete project root."""
    project_root: str
    excluded_paths: Tuple[str, ...]
    excluded_names: Tuple[str, ...]
    executables: Tuple[str, ...]

class PathService:
    """Service resolving packaging settings against a project root."""

    def __init__(self, settings: PackagingSettings):
        self.settings = settings
        self.logger = logging.getLogger("bundle_settings.path_service")

    def resolve_for(self, root: Union[str, Path]) -> ResolvedSettings:
        """Resolve rooted exclusions and executables against ``root``.

        Bare-name exclusions stay unresolved: they apply at any depth.
        """
        project_root = os.path.abspath(os.fspath(root))
        self.logger.debug(f"Resolving packaging settings against {project_root}")

        excluded_paths = tuple(resolve(project_root, entry) for entry in self.settings.root_exclusions())
        excluded_names = tuple(self.settings.name_exclusions())
        executables = tuple(resolve(project_root, entry) for entry in self.settings.executables())

        self.logger.info(
            f"Resolved {len(excluded_paths)} rooted exclusions, {len(excluded_names)} name exclusions "
            f"and {len(executables)} executables"
        )
        return ResolvedSettings(
            project_root=project_root,
            excluded_paths=excluded_paths,
            excluded_names=excluded_names,
            executables=executables,
        )
