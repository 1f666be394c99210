#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

logger = logging.getLogger("s3web")

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(level="WARNING", fmt=LOG_FORMAT):
    """Send s3web log records to stderr at the given level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))

    logger.handlers[:] = [handler]
    logger.setLevel(level.upper() if isinstance(level, str) else level)


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. S3WEB_CONFIG environment variable
    2. ~/.s3web/config.{json,toml,yaml,yml}
    """
    if 'S3WEB_CONFIG' in os.environ:
        path = Path(os.environ['S3WEB_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.s3web'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            if isinstance(file_config, dict):
                config = merge_configs(config, file_config)
            else:
                logger.error(f"Error loading config from {config_path}: top level is not a mapping")
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    return apply_env_overrides(config)


def get_default_config():
    """Get default configuration."""
    return {
        "logging": {
            "level": "WARNING",
            "format": LOG_FORMAT
        },
        # name -> s3web:// identifier
        "remotes": {}
    }


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: S3WEB_SECTION_KEY
    For example: S3WEB_LOGGING_LEVEL=DEBUG
    """
    env_prefix = "S3WEB_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "S3WEB_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        if value.lower() in ('true', '1', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', '0', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if not isinstance(current_level[matched_key], dict):
                # Path conflict: env var is longer than the config path
                break
            current_level = current_level[matched_key]
            i += best_match_len

    return config


def resolve_remote(name_or_identifier, config=None):
    """
    Return the identifier for a configured remote name.

    Anything that is not a configured name is returned unchanged, so
    identifiers can be passed straight through.
    """
    if config is None:
        config = load_config()
    remotes = config.get("remotes")
    if not isinstance(remotes, dict):
        return name_or_identifier
    return remotes.get(name_or_identifier, name_or_identifier)
