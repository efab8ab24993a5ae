"""
YAML configuration and city list loading.

Example config/example_config.yaml:

    cities_path: cities.json
    num_edges: 30
    weight_min: 10
    weight_max: 100
    seed: null
    canvas:
      width: 1000
      height: 800
      radius: null
    output_path: ../results/route.png
    log_level: INFO

Relative paths are resolved against the directory of the config file.
"""

import copy
import json
import logging
import os

import yaml

from cityroute.errors import ConfigFileError, GraphConfigError
from cityroute.log import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "example_config.yaml")

DEFAULT_CONFIG = {
    "cities_path": os.path.join(PROJECT_ROOT, "config", "cities.json"),
    "num_edges": 30,
    "weight_min": 10,
    "weight_max": 100,
    "seed": None,
    "canvas": {
        "width": 1000,
        "height": 800,
        "radius": None,
    },
    "output_path": os.path.join(PROJECT_ROOT, "results", "route.png"),
    "log_level": "INFO",
}

_PATH_KEYS = ("cities_path", "output_path")


def _check_int(name, value, minimum, allow_none=False):
    if value is None and allow_none:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise GraphConfigError(f"config '{name}' must be an integer >= {minimum}, got {value!r}")


def validate_config(config):
    """Check value types and ranges; raises GraphConfigError."""
    _check_int("num_edges", config["num_edges"], 0)
    _check_int("weight_min", config["weight_min"], 1)
    _check_int("weight_max", config["weight_max"], 1)
    if config["weight_min"] > config["weight_max"]:
        raise GraphConfigError(
            f"config 'weight_min' ({config['weight_min']}) exceeds 'weight_max' ({config['weight_max']})"
        )
    _check_int("seed", config["seed"], 0, allow_none=True)

    canvas = config["canvas"]
    if not isinstance(canvas, dict):
        raise GraphConfigError(f"config 'canvas' must be a mapping, got {canvas!r}")
    _check_int("canvas.width", canvas["width"], 1)
    _check_int("canvas.height", canvas["height"], 1)
    radius = canvas["radius"]
    if radius is not None and (isinstance(radius, bool) or not isinstance(radius, (int, float)) or radius <= 0):
        raise GraphConfigError(f"config 'canvas.radius' must be a positive number, got {radius!r}")

    for key in _PATH_KEYS:
        if not isinstance(config[key], str) or not config[key]:
            raise GraphConfigError(f"config '{key}' must be a non-empty path string, got {config[key]!r}")

    level = config["log_level"]
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise GraphConfigError(f"config 'log_level' must be a level name or number, got {level!r}")
    if isinstance(level, str) and not isinstance(logging.getLevelName(level.upper()), int):
        raise GraphConfigError(f"config 'log_level' is not a known level: {level!r}")
    return config


def load_config(path=None):
    """
    Load a YAML config file and merge it over DEFAULT_CONFIG.
    With path=None the defaults are returned as-is.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return validate_config(config)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigFileError(f"cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigFileError(f"malformed YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFileError(f"config file {path} must contain a mapping")

    base_dir = os.path.dirname(os.path.abspath(path))
    for key, value in data.items():
        if key not in config:
            logger.warning("ignoring unknown config key %r in %s", key, path)
            continue
        if key == "canvas":
            if not isinstance(value, dict):
                raise GraphConfigError(f"config 'canvas' must be a mapping, got {value!r}")
            for ckey, cvalue in value.items():
                if ckey not in config["canvas"]:
                    logger.warning("ignoring unknown config key 'canvas.%s' in %s", ckey, path)
                    continue
                config["canvas"][ckey] = cvalue
        elif key in _PATH_KEYS and isinstance(value, str) and value:
            config[key] = os.path.normpath(os.path.join(base_dir, value))
        else:
            config[key] = value

    return validate_config(config)


def load_city_names(path):
    """Read a JSON array of city names."""
    try:
        with open(path, encoding="utf-8") as f:
            cities = json.load(f)
    except OSError as e:
        raise ConfigFileError(f"cannot read city list {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"malformed JSON in city list {path}: {e}") from e

    if not isinstance(cities, list) or not all(isinstance(c, str) for c in cities):
        raise ConfigFileError(f"city list {path} must be a JSON array of strings")
    logger.debug("loaded %d city names from %s", len(cities), path)
    return cities
