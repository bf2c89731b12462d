# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timetable import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        config = configuration.get_default_configuration()
        if isinstance(loaded, dict):
            # Keys missing from older config files keep their defaults, and so do
            # nulls written over settings that cannot be auto
            for key, value in loaded.items():
                if key not in config:
                    continue
                default = config[key]  # type: ignore[literal-required]
                if value is None and default is not None:
                    continue
                config[key] = value  # type: ignore[literal-required]
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(self, **settings: Any) -> None:
        """
        Update persisted defaults.

        Settings passed as None are left unchanged; unknown settings raise.

        Raises:
            KeyError: If a setting is not part of the configuration
        """
        for key, value in settings.items():
            if key not in self.config:
                raise KeyError(key)
            if value is None:
                continue
            self.config[key] = value  # type: ignore[literal-required]
            self.is_dirty = True

    def clear_settings(self, *keys: str) -> None:
        """Restore settings whose default is None, such as width or column_width."""
        defaults = configuration.get_default_configuration()
        for key in keys:
            if key not in defaults:
                raise KeyError(key)
            self.config[key] = defaults[key]  # type: ignore[literal-required]
            self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
