import argparse
import asyncio
import json
import sys
from pathlib import Path
from bundle_settings.reporters import REPORTERS
from bundle_settings.services.path_service import PathService
from bundle_settings.utils.config_loader import ConfigLoader
from bundle_settings.utils.logger import setup_logger
from bundle_settings.utils.exceptions import PackagingError

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve packaging exclusions and executables for a project")
    parser.add_argument("-r", "--root", default=".", help="Project root to resolve entries against")
    parser.add_argument("-c", "--config", help="Path to a YAML file overriding the packaging settings")
    parser.add_argument("-e", "--env-file", help="Path to .env file")
    parser.add_argument("-o", "--output-dir", help="Directory to write manifests into")
    parser.add_argument("-f", "--format", nargs="+", default=["json"], choices=sorted(REPORTERS),
                        help="Manifest formats to write when --output-dir is given")
    parser.add_argument("-l", "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--log-file", help="Path to log file")
    return parser

async def _write_reports(settings, resolved, output_dir: Path, formats) -> list:
    written = []
    for name in formats:
        reporter = REPORTERS[name](settings=settings, output_dir=output_dir)
        written.append(await reporter.report(resolved))
    return written

def main(argv=None) -> int:
    """Main entry point for the packaging settings tool."""
    args = build_parser().parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    logger = setup_logger("bundle_settings", args.log_level, log_file=log_file, stream=sys.stderr)

    try:
        root = Path(args.root)
        if not root.is_dir():
            raise PackagingError(f"Project root does not exist or is not a directory: {root}")

        logger.info("Loading packaging settings...")
        settings = ConfigLoader.load_settings(
            config_path=Path(args.config) if args.config else None,
            env_file=Path(args.env_file) if args.env_file else None
        )

        resolved = PathService(settings).resolve_for(root)
        manifest = {
            "project_root": resolved.project_root,
            "excluded_paths": list(resolved.excluded_paths),
            "excluded_names": list(resolved.excluded_names),
            "executables": list(resolved.executables),
        }
        print(json.dumps(manifest, indent=2))

        if args.output_dir:
            for path in asyncio.run(_write_reports(settings, resolved, Path(args.output_dir), args.format)):
                logger.info(f"Manifest written to {path}")

    except PackagingError as e:
        logger.error(f"Error resolving packaging settings: {str(e)}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
