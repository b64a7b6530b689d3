from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple
from ..config.packaging_defaults import BASE_PATH_KEY, EXECUTABLES, NAME_EXCLUSIONS, ROOT_EXCLUSIONS
from ..utils.exceptions import ConfigurationLoadError

@dataclass(frozen=True)
class PackagingSettings:
    """Exclusion entries and executable designations for a deployment package.

    ``ignore`` keeps the entries in declaration order. ``rooted`` holds one
    flag per ``ignore`` entry: a rooted entry is anchored at the project root,
    any other entry is a bare file name that applies at any depth of the
    package tree. An empty ``rooted`` marks every entry bare.
    """
    ignore: Tuple[str, ...] = ()
    executable_files: Tuple[str, ...] = ()
    rooted: Tuple[bool, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "ignore", tuple(self.ignore))
        object.__setattr__(self, "executable_files", tuple(self.executable_files))
        rooted = tuple(bool(flag) for flag in self.rooted) or (False,) * len(self.ignore)
        if len(rooted) != len(self.ignore):
            raise ValueError(
                f"Expected {len(self.ignore)} rooted flags, one per ignore entry, got {len(rooted)}"
            )
        object.__setattr__(self, "rooted", rooted)

    @classmethod
    def load(cls) -> "PackagingSettings":
        """Build the settings from the compiled-in declaration."""
        return cls(
            ignore=ROOT_EXCLUSIONS + NAME_EXCLUSIONS,
            executable_files=EXECUTABLES,
            rooted=(True,) * len(ROOT_EXCLUSIONS) + (False,) * len(NAME_EXCLUSIONS),
        )

    def exclusions(self) -> List[str]:
        return list(self.ignore)

    def executables(self) -> List[str]:
        return list(self.executable_files)

    def entries(self) -> List[Tuple[str, bool]]:
        """Pairs of (entry, rooted) in declaration order."""
        return list(zip(self.ignore, self.rooted))

    def is_rooted(self, entry: str) -> bool:
        """True if any occurrence of ``entry`` is anchored at the project root."""
        return any(flag for name, flag in self.entries() if name == entry)

    def root_exclusions(self) -> List[str]:
        return [entry for entry, flag in self.entries() if flag]

    def name_exclusions(self) -> List[str]:
        return [entry for entry, flag in self.entries() if not flag]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PackagingSettings":
        """
        Build settings from the on-disk ``{"packaging": {...}}`` shape.

        Args:
            data: Mapping with a ``packaging`` section holding ``ignore`` and
                ``executables`` lists. Rooted ignore entries are written as
                ``{"base_path": "<entry>"}``.

        Returns:
            PackagingSettings built from the mapping

        Raises:
            ConfigurationLoadError: If the mapping does not have that shape
        """
        if not isinstance(data, dict):
            raise ConfigurationLoadError("Configuration must be a mapping")
        section = data.get("packaging")
        if not isinstance(section, dict):
            raise ConfigurationLoadError("Configuration section 'packaging' is missing or not a mapping")

        ignore = []
        rooted = []
        for item in _as_list(section.get("ignore", []), "packaging.ignore"):
            if isinstance(item, dict):
                if set(item) != {BASE_PATH_KEY}:
                    raise ConfigurationLoadError(
                        f"Ignore entry mappings must have the single key '{BASE_PATH_KEY}', got {sorted(map(str, item))}"
                    )
                entry = _as_entry(item[BASE_PATH_KEY], "packaging.ignore")
                rooted.append(True)
            else:
                entry = _as_entry(item, "packaging.ignore")
                rooted.append(False)
            ignore.append(entry)

        executables = [
            _as_entry(item, "packaging.executables")
            for item in _as_list(section.get("executables", []), "packaging.executables")
        ]
        return cls(ignore=ignore, executable_files=executables, rooted=rooted)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk ``{"packaging": {...}}`` shape."""
        return {
            "packaging": {
                "ignore": [
                    {BASE_PATH_KEY: entry} if flag else entry
                    for entry, flag in self.entries()
                ],
                "executables": list(self.executable_files),
            }
        }

def _as_list(value: Any, key: str) -> Iterable[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationLoadError(f"'{key}' must be a list, got {type(value).__name__}")
    return value

def _as_entry(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationLoadError(f"Entries of '{key}' must be non-empty strings, got {value!r}")
    return value
