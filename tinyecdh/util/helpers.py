"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import platform
import sys
from typing import Dict, Iterable, Union

from appdirs import AppDirs  # type: ignore


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    loggers: Dict[str, Logger] = {}


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
) -> None:
    """
    Prepare for using getLogger. Logs to stdout. If filepath is provided, log
    outputs will also be saved to a rotating log file at that location. Loggers
    that already exist and those created later are set to logLvl.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The logging level for all loggers from getLogger.
    """
    LogSettings.defaultLevel = logLvl
    for logger in LogSettings.loggers.values():
        logger.setLevel(logLvl)

    log_formatter = logging.Formatter(
        "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath, mode="a", maxBytes=5 * 1024 * 1024, backupCount=2,
        )
        fileHandler.setFormatter(log_formatter)
        LogSettings.root.addHandler(fileHandler)
    if not sys.executable.endswith("pythonw.exe"):
        # pythonw on Windows has no stdout.
        printHandler = logging.StreamHandler()
        printHandler.setFormatter(log_formatter)
        LogSettings.root.addHandler(printHandler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger at the level last passed to prepareLogging.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.defaultLevel)
    LogSettings.loggers[name] = l
    return l


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Read the specified keys from an INI-formatted file. Every section is
    searched, and keys placed before any section header are accepted too.
    Keys that are not found are absent from the result.

    Args:
        path: The path to the INI file.
        keys: Keys to search for.

    Returns:
        Discovered keys and values.
    """
    config = configparser.ConfigParser(strict=False)
    # configparser rejects keys outside a section, so open one up front.
    with open(path) as f:
        config.read_string("[tinyecdh]\n" + f.read())
    res = {}
    for section in config.sections():
        for k in config[section]:
            if k in keys:
                res[k] = config[section][k]
    return res


def appDataDir(appName: str) -> str:
    """
    appDataDir returns an operating system specific directory to be used for
    storing application data for an application.

    Args:
        appName: The name of the app whose data directory is wanted.

    Returns:
        The path of the wanted data directory.
    """
    if appName == "" or appName == ".":
        return "."

    appName = appName.lstrip(".")
    if platform.system() in ("Windows", "Darwin"):
        return AppDirs(appName.capitalize(), False).user_data_dir

    homeDir = os.path.expanduser("~") or os.getenv("HOME", "")
    if homeDir == "":
        return "."
    return os.path.join(homeDir, "." + appName.lower())
