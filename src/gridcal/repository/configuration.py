# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gridcal import configuration


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: Add any setting introduced after the config file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        storage_key: Optional[str] = None,
        week_start: Optional[str] = None,
        show_conflict_warning: Optional[bool] = None,
        expand_recurring_conflicts: Optional[bool] = None,
        max_recurrence_iterations: Optional[int] = None,
        log_level: Optional[str] = None,
        dev_mode: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if storage_key is not None:
            self.config["storage_key"] = storage_key
        if week_start is not None:
            self.config["week_start"] = week_start
        if show_conflict_warning is not None:
            self.config["show_conflict_warning"] = show_conflict_warning
        if expand_recurring_conflicts is not None:
            self.config["expand_recurring_conflicts"] = expand_recurring_conflicts
        if max_recurrence_iterations is not None:
            self.config["max_recurrence_iterations"] = max_recurrence_iterations
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if dev_mode is not None:
            self.config["dev_mode"] = dev_mode


CONFIGURATION_REPO = ConfigurationRepository()
