import json
from pathlib import Path
from typing import Any, Dict
import aiofiles
from datetime import datetime
from .base_reporter import BaseReporter
from ..services.path_service import ResolvedSettings
from ..utils.exceptions import ReportGenerationError

class JSONReporter(BaseReporter):
    """JSON implementation of the manifest reporter."""

    async def report(self, resolved: ResolvedSettings) -> Path:
        """Generate and save a JSON manifest of the resolved settings."""
        output_file = self.output_dir / f"{self.filename}.json"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            manifest = await self.build_manifest(resolved)
            async with aiofiles.open(output_file, mode='w', encoding='utf-8') as f:
                await f.write(json.dumps(manifest, indent=2))
        except OSError as e:
            raise ReportGenerationError(f"Failed to write JSON manifest to {output_file}: {str(e)}") from e
        return output_file

    async def build_manifest(self, resolved: ResolvedSettings) -> Dict[str, Any]:
        return {
            "generated_at": datetime.now().isoformat(),
            "project_root": resolved.project_root,
            "packaging": self.settings.to_dict()["packaging"],
            "resolved": {
                "excluded_paths": list(resolved.excluded_paths),
                "excluded_names": list(resolved.excluded_names),
                "executables": list(resolved.executables),
            },
            "summary": await self.get_summary(resolved),
        }
