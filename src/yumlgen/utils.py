import importlib
import json
import yaml
import logging
from pydantic import ValidationError
from pathlib import Path
from yumlgen.config import Configuration, JSON


def load_config_file(path: str | Path) -> JSON:
    if isinstance(path, str):
        path = Path(path)
    with open(path, encoding="UTF-8") as file:
        if path.suffix in [".yaml", ".yml"]:
            loaded = yaml.safe_load(file)
        else:
            loaded = json.load(file)
    return loaded


def load_config(file_name: str | Path | None = None) -> Configuration:
    """Load configuration from YAML or JSON file, defaults if no file is given.

    :param file_name: path to configuration file
    :return: validated configuration
    :raises ValueError: if the file content is not a valid configuration
    """
    if file_name is None:
        return Configuration()
    try:
        return Configuration().model_validate(load_config_file(file_name) or {})
    except ValidationError as error:
        raise ValueError("Error parsing configuration file") from error


def import_type(path: str) -> type:
    """Import a class from ``package.module:ClassName`` or ``package.module.ClassName``.

    Nested classes can be given with dots after the colon (``module:Outer.Inner``).

    :param path: dotted path to the class
    :return: the class
    :raises ImportError: if the module cannot be imported
    :raises AttributeError: if the class does not exist
    """
    if ":" in path:
        module_name, qualname = path.split(":", 1)
    else:
        module_name, _, qualname = path.rpartition(".")
    if not module_name or not qualname:
        raise ImportError(f"Not a type path: {path}")
    value = importlib.import_module(module_name)
    for name in qualname.split("."):
        value = getattr(value, name)
    if not isinstance(value, type):
        raise TypeError(f"{path} is not a class")
    return value


class LogFormatter(logging.Formatter):
    _grey = "\x1b[38;21m"
    _green = "\x1b[32m"
    _red = "\x1b[31;21m"
    _bold_red = "\x1b[31;1m"
    _yellow = "\u001b[33m"
    _blue = "\u001b[34m"
    _white = "\u001b[37m"
    _reset = "\x1b[0m"
    _bold = "\u001b[1m"
    _prefix = (
        _green
        + "%(asctime)s  "
        + _reset
        + _blue
        + "%(name)s "
        + _reset
        + _white
        + "%(funcName)s "
        + _reset
        + _bold
        + _grey
        + "%(levelname)s "
        + _reset
    )
    _message = "%(message)s"
    _formats = {
        logging.DEBUG: _prefix + _grey + _message + _reset,
        logging.INFO: _prefix + _white + _message + _reset,
        logging.WARNING: _prefix + _yellow + _message + _reset,
        logging.ERROR: _prefix + _red + _message + _reset,
        logging.CRITICAL: _prefix + _bold_red + _message + _reset,
    }

    def format(self, record):
        log_fmt = self._formats.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)
