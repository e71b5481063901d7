"""Configuration management for subpath-serve.

Supports an optional TOML configuration file with auto-discovery,
overridden by command-line options.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "subpath-serve.toml"

DEFAULT_PORT = 8050
DEFAULT_IGNORE = (".git",)


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class ServeConfig:
    """Served folder configuration."""

    folder: Path = field(default_factory=lambda: Path("serve"))
    git_http_prefix: str | None = None
    ignore: tuple[str, ...] = DEFAULT_IGNORE


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig
    serve: ServeConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for subpath-serve.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), serve=ServeConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        serve = cls._parse_serve(data.get("serve"), config_dir)

        return cls(server=server, serve=serve, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "0.0.0.0")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", DEFAULT_PORT)
        # bool is a subclass of int
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_serve(cls, data: object, config_dir: Path) -> ServeConfig:
        """Parse serve configuration section.

        Args:
            data: Raw serve section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ServeConfig instance
        """
        if data is None:
            return ServeConfig(folder=config_dir / "serve")

        if not isinstance(data, dict):
            raise ValueError("serve section must be a dictionary")

        folder = data.get("folder", "serve")
        if not isinstance(folder, str):
            raise ValueError("serve.folder must be a string")

        prefix = data.get("git_http_prefix")
        if prefix is not None and not isinstance(prefix, str):
            raise ValueError("serve.git_http_prefix must be a string")

        ignore_raw = data.get("ignore", list(DEFAULT_IGNORE))
        if not isinstance(ignore_raw, list):
            raise ValueError("serve.ignore must be a list")
        ignore: list[str] = []
        for item in ignore_raw:
            if not isinstance(item, str):
                raise ValueError("serve.ignore items must be strings")
            ignore.append(item)

        return ServeConfig(
            folder=config_dir / folder,
            git_http_prefix=_normalize_prefix(prefix),
            ignore=tuple(ignore),
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        folder: Path | None = None,
        git_http_prefix: str | None = None,
        ignore: tuple[str, ...] | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. An empty
        git_http_prefix clears a prefix set in the config file.

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        serve = self.serve
        if folder is not None:
            serve = replace(serve, folder=folder)
        if git_http_prefix is not None:
            serve = replace(serve, git_http_prefix=_normalize_prefix(git_http_prefix))
        if ignore is not None:
            serve = replace(serve, ignore=ignore)

        return replace(self, server=server, serve=serve)

    def validate(self) -> Config:
        """Check the served folder and return config with an absolute folder.

        Raises:
            FileNotFoundError: If the folder does not exist
            ValueError: If the path is not a directory
        """
        folder = self.serve.folder
        if not folder.exists():
            raise FileNotFoundError(
                f"Folder to serve files from, '{folder}' does not exist",
            )
        if not folder.is_dir():
            raise ValueError(f"Path '{folder}' is not a directory")
        return replace(self, serve=replace(self.serve, folder=folder.resolve()))


def _normalize_prefix(prefix: str | None) -> str | None:
    if prefix is None:
        return None
    return prefix.strip() or None
