"""YAML config sources with conf.d directory support.

Extends pydantic-settings YamlConfigSettingsSource to support:
- Main YAML file (e.g., conf/app.yaml)
- conf.d directory merging (e.g., conf/app.d/*.yaml)
- Alphabetical file ordering in conf.d

Environment variables always take precedence over these files in production
deployments; they exist for local development convenience.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic_settings import YamlConfigSettingsSource

if TYPE_CHECKING:
    from pydantic_settings import BaseSettings


class ConfDYamlConfigSettingsSource(YamlConfigSettingsSource):
    """YAML settings source with conf.d directory support.

    Supports the standard Linux conf.d pattern:
    - conf/db.yaml        (base configuration)
    - conf/db.d/*.yaml    (override files, merged alphabetically)

    The base directory can be overridden per domain, e.g. DB_CONFIG_DIR=/etc/school-api.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: str,
        confd_dir: str | None,
        config_dir_env: str,
        base_dir: str = "conf",
        yaml_file_encoding: str | None = "utf-8",
    ) -> None:
        config_base = Path(os.getenv(config_dir_env, base_dir))

        yaml_files: list[Path] = []

        main_file = config_base / yaml_file
        if main_file.exists():
            yaml_files.append(main_file)

        if confd_dir:
            confd_path = config_base / confd_dir
            if confd_path.is_dir():
                yaml_files.extend(sorted(confd_path.glob("*.yaml")))
                yaml_files.extend(sorted(confd_path.glob("*.yml")))

        self._yaml_files = yaml_files

        super().__init__(
            settings_cls=settings_cls,
            yaml_file=yaml_files or None,
            yaml_file_encoding=yaml_file_encoding,
        )

    def __repr__(self) -> str:
        files_str = ", ".join(str(f) for f in self._yaml_files)
        return f"{self.__class__.__name__}(yaml_files=[{files_str}])"


def create_yaml_source(
    settings_cls: type[BaseSettings],
    domain: str,
) -> ConfDYamlConfigSettingsSource:
    """Create the YAML source for one settings domain.

    Loads ``conf/<domain>.yaml`` and then ``conf/<domain>.d/*.yaml``.
    The directory is overridable with ``<DOMAIN>_CONFIG_DIR``.

    Args:
        settings_cls: The settings class being configured.
        domain: Short domain name (app, db, redis, graphql, logging, health).

    Returns:
        Configured YAML settings source.
    """
    return ConfDYamlConfigSettingsSource(
        settings_cls,
        yaml_file=f"{domain}.yaml",
        confd_dir=f"{domain}.d",
        config_dir_env=f"{domain.upper()}_CONFIG_DIR",
    )
