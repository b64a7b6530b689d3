import logging
import pytest
from bundle_settings.utils.config_loader import ConfigLoader

EXPECTED_EXCLUSIONS = [
    "vendor", "tests", "storage", ".idea", ".git", ".gitignore", ".env",
    ".env.example", ".gitkeep", ".htaccess", "readme.md", "versions.json",
    ".php_cs.cache", "composer.json", "composer.lock",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keeps loader environment variables and stray .env files out of each test."""
    for name in (ConfigLoader.CONFIG_ENV, ConfigLoader.EXECUTABLES_ENV, ConfigLoader.EXTRA_IGNORE_ENV):
        # setenv first so the variable is removed again on teardown, even if
        # a test's .env file sets it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_logging():
    """setup_logger replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    app_level = logging.getLogger("bundle_settings").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("bundle_settings").setLevel(app_level)
