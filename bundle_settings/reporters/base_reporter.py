from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict
from ..models.settings import PackagingSettings
from ..services.path_service import ResolvedSettings

class BaseReporter(ABC):
    """Abstract base class for packaging manifest reporters."""

    filename: str = "packaging_manifest"

    def __init__(self, settings: PackagingSettings, output_dir: Path):
        self.settings = settings
        self.output_dir = Path(output_dir)

    @abstractmethod
    async def report(self, resolved: ResolvedSettings) -> Path:
        """Write the manifest for the resolved settings and return its path."""
        pass

    async def get_summary(self, resolved: ResolvedSettings) -> Dict[str, int]:
        """Count the entries the consuming tool will act on."""
        return {
            "excluded_paths": len(resolved.excluded_paths),
            "excluded_names": len(resolved.excluded_names),
            "executables": len(resolved.executables),
        }
