"""Configuration loader for wikiparse output settings.

Loads settings from YAML files with priority resolution:
1. User config: ~/.config/{app_name}/config.yaml (highest priority)
2. Project config: .{app_name}/config.yaml in current directory
3. Package defaults: shipped with wikiparse (fallback)
"""

from pathlib import Path

from loguru import logger

from .documents import DocumentKind

# Lazy import yaml to avoid startup cost
_yaml = None

CONFIG_FILENAME = "config.yaml"

# Settings merged key by key instead of replaced wholesale.
_NAME_MAPS = ("filenames", "tagger_filenames")


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path() -> Path:
    """Get path to package default settings using importlib.resources."""
    try:
        from importlib.resources import files

        return files("wikiparse.config_data") / "_defaults"
    except (ImportError, TypeError):
        # Fallback for editable installs
        return Path(__file__).parent / "config_data" / "_defaults"


class ParserConfig:
    """Load settings from config files with priority resolution.

    Config locations are checked in priority order:
    1. ~/.config/{app_name}/config.yaml - User overrides
    2. .{app_name}/config.yaml - Project-specific settings
    3. Package defaults - Shipped with wikiparse

    A key missing from a higher-priority file falls through to the next one,
    so an override file only needs the settings it changes. ``filenames`` and
    ``tagger_filenames`` are merged per document kind.
    """

    def __init__(self, app_name: str = "wikiparse", paths: list[Path] | None = None):
        """Initialize and load every available config file.

        Args:
            app_name: Application name for config directory resolution.
            paths: Explicit override files, highest priority first. When
                given, the user and project locations are not consulted.
        """
        self._app_name = app_name
        if paths is not None:
            self._config_locations = [Path(p) for p in paths]
        else:
            self._config_locations = [
                Path.home() / ".config" / app_name / CONFIG_FILENAME,  # User overrides
                Path.cwd() / f".{app_name}" / CONFIG_FILENAME,  # Project config
            ]

        self._settings: dict = {}
        self._name_maps: dict[str, dict[str, str]] = {key: {} for key in _NAME_MAPS}
        self._load_all()

    def _load_all(self) -> None:
        """Merge settings from lowest to highest priority."""
        defaults = _get_package_defaults_path() / CONFIG_FILENAME
        self._merge(self._read(defaults))

        for config_file in reversed(self._config_locations):
            if Path(config_file).is_file():
                self._merge(self._read(config_file))

    def _read(self, config_file) -> dict:
        yaml = _get_yaml()
        content = config_file.read_text(encoding="utf-8")

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            logger.warning("Skipping unreadable config file {}: {}", config_file, exc)
            return {}

        if not isinstance(data, dict):
            return {}
        return data

    def _merge(self, data: dict) -> None:
        for key, value in data.items():
            if key in _NAME_MAPS and isinstance(value, dict):
                self._name_maps[key].update({str(k): str(v) for k, v in value.items()})
            else:
                self._settings[key] = value

    @property
    def output_dir(self) -> Path:
        """Directory the output documents are written to."""
        return Path(self._settings.get("output_dir", "xmlOutput"))

    @property
    def workers(self) -> int:
        """Number of extraction threads."""
        return int(self._settings.get("workers", 1))

    @property
    def max_capture(self) -> int | None:
        """Longest ``[[…]]``/``{{…}}`` capture kept, or None for no limit."""
        value = self._settings.get("max_capture")
        return None if value is None else int(value)

    def filename_for(self, kind: DocumentKind) -> str:
        """Get the output file name for a document kind."""
        try:
            return self._name_maps["filenames"][kind.value]
        except KeyError:
            return f"{kind.value}.xml"

    @property
    def filenames(self) -> dict[DocumentKind, str]:
        """Output file names for every document kind."""
        return {kind: self.filename_for(kind) for kind in DocumentKind}

    @property
    def tagger_dir(self) -> Path:
        """Directory the tagger input text files are written to."""
        return Path(self._settings.get("tagger_dir", "POSTaggerInput"))

    def tagger_filename_for(self, kind: DocumentKind) -> str:
        """Get the tagger input file name for a document kind."""
        try:
            return self._name_maps["tagger_filenames"][kind.value]
        except KeyError:
            return f"{kind.value}.txt"

    @property
    def tagger_filenames(self) -> dict[DocumentKind, str]:
        """Tagger input file names for every document kind."""
        return {kind: self.tagger_filename_for(kind) for kind in DocumentKind}
