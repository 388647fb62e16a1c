"""Configuration"""
from __future__ import annotations

from typing import Optional

import pyperclip
import rich
import typer
from typing_extensions import Annotated

from lscache_tools.models.keyring_config import ConfigKey, KeyringConfig
from lscache_tools.models.settings import env

app = typer.Typer(no_args_is_help=True)
cp = rich.print


@app.command(name="set")
def set_config(
        key: ConfigKey,
        value: Annotated[Optional[str], typer.Argument()] = None
):
    """Set a keyring value. Omit the value to clear it."""
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(ConfigKey(key), None)
        else:
            config[ConfigKey(key)] = value

    cp(f"{'Cleared' if value is None else 'Saved'} key {repr(key.value)}")


@app.command(name="set-cp")
def set_cp_config(
    key: ConfigKey
):
    """Set a keyring value from clipboard."""
    value = pyperclip.paste()
    if not value:
        cp("❌  Clipboard is empty.")
        raise SystemExit(1)

    with KeyringConfig.load_from_keyring() as config:
        config[ConfigKey(key)] = value

    cp(f"Saved key {repr(key.value)} from clipboard ({len(value)} chars)")


@app.command()
def show():
    """Show the keyring values and the environment settings."""
    config = KeyringConfig.load_from_keyring()
    cp(config.to_keys_json())
    rich.print_json(env.model_dump_json(exclude={"http_auth_password"}))
