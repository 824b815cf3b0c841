"""Optional build settings from rchan.toml in the working directory."""

import tomllib
from pathlib import Path

SETTINGS_FILENAME = "rchan.toml"

DEFAULT_SETTINGS = {
    'output_dir': "pkgs",
    'build_dir': "build",
    'artifact_suffix': ".pkg.tar.zst",
    'makepkg_command': "makepkg -s --noconfirm",
}


def load_settings(base):
    """Load build settings from rchan.toml, falling back to defaults."""
    settings = dict(DEFAULT_SETTINGS)
    settings_file = Path(base) / SETTINGS_FILENAME
    if not settings_file.exists():
        return settings

    try:
        with open(settings_file, 'rb') as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Warning: Error reading {SETTINGS_FILENAME}: {e}")
        print("Using default build settings")
        return settings

    build_section = config.get('build', {})
    if not isinstance(build_section, dict):
        print(f"Warning: [build] in {SETTINGS_FILENAME} must be a table, ignoring it")
        return settings

    for key in DEFAULT_SETTINGS:
        if key not in build_section:
            continue
        value = build_section[key]
        if not isinstance(value, str) or not value:
            print(f"Warning: Ignoring invalid '{key}' in {SETTINGS_FILENAME} (must be a non-empty string)")
            continue
        settings[key] = value

    return settings
