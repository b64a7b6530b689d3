from datetime import datetime
from pathlib import Path
from typing import Iterable, List
import aiofiles
from .base_reporter import BaseReporter
from ..services.path_service import ResolvedSettings
from ..utils.exceptions import ReportGenerationError

class MarkdownReporter(BaseReporter):
    """Generate markdown format manifests."""

    async def report(self, resolved: ResolvedSettings) -> Path:
        output_file = self.output_dir / f"{self.filename}.md"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            content = await self.render(resolved)
            async with aiofiles.open(output_file, mode='w', encoding='utf-8') as f:
                await f.write(content)
        except OSError as e:
            raise ReportGenerationError(f"Failed to write Markdown manifest to {output_file}: {str(e)}") from e
        return output_file

    async def render(self, resolved: ResolvedSettings) -> str:
        summary = await self.get_summary(resolved)
        lines = [
            "# Packaging Manifest",
            "",
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            f"Project root: `{resolved.project_root}`",
            "",
            "## Summary",
            "",
            "| Category | Count |",
            "|----------|-------|",
        ]
        lines.extend(f"| {key.replace('_', ' ').title()} | {count} |" for key, count in summary.items())
        lines.append("")

        lines.extend(self._section("Excluded Paths", "Anchored at the project root.", resolved.excluded_paths))
        lines.extend(self._section("Excluded Names", "Matched at any depth of the package tree.", resolved.excluded_names))
        lines.extend(self._section("Executables", "Marked executable by the packaging tool.", resolved.executables))
        return "\n".join(lines)

    def _section(self, title: str, note: str, entries: Iterable[str]) -> List[str]:
        section = [f"## {title}", "", note, ""]
        entries = list(entries)
        if entries:
            section.extend(f"- `{entry}`" for entry in entries)
        else:
            section.append("_None_")
        section.append("")
        return section
