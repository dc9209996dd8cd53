# -*- coding: utf-8 -*-
"""
Persisted settings for the Export Units button.

Kept as settings.json in the extension's data folder, next to the buttons
that read it.
"""

import io
import json
import logging
import os

from unitsreport.host import Discipline

_logger = logging.getLogger(__name__)

OUTPUT_FILE_NAME = "result.json"

DATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "data"))
SETTINGS_PATH = os.path.join(DATA_DIR, "settings.json")


class ReportSettings(object):
    def __init__(self, discipline=None, output_folder=None):
        # None: Common discipline / current working directory
        self.discipline = discipline
        self.output_folder = output_folder

    def discipline_id(self, host, logger=None):
        """Configured discipline, or the host default when unset or unknown to the host."""
        logger = logger or _logger
        if not self.discipline:
            return host.default_discipline()
        discipline = Discipline(self.discipline)
        if discipline not in host.all_disciplines():
            # ids are versioned; a saved one can outlive a Revit upgrade
            logger.warning("Unknown discipline {} in settings, using default.".format(self.discipline))
            return host.default_discipline()
        return discipline

    def update_output_folder(self, folder):
        # a cancelled picker (None) keeps the saved folder
        if folder and os.path.isdir(folder):
            self.output_folder = folder
        return self.output_folder

    def to_dict(self):
        return {
            "discipline": self.discipline,
            "output_folder": self.output_folder,
        }

    @classmethod
    def from_dict(cls, data):
        defaults = cls()
        data = data or {}
        return cls(
            discipline=data.get("discipline", defaults.discipline),
            output_folder=data.get("output_folder", defaults.output_folder),
        )


def output_path(settings):
    folder = settings.output_folder or os.getcwd()
    return os.path.join(folder, OUTPUT_FILE_NAME)


def load_settings(path=SETTINGS_PATH):
    if not os.path.exists(path):
        return ReportSettings()
    try:
        with io.open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (IOError, ValueError):
        return ReportSettings()
    if not isinstance(data, dict):
        return ReportSettings()
    return ReportSettings.from_dict(data)


def save_settings(settings, path=SETTINGS_PATH):
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)
    with io.open(path, "w", encoding="utf-8") as handle:
        handle.write(json.dumps(settings.to_dict(), indent=2))
