import dotenv
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    # wp-cli
    wp_command: str = "wp"
    wp_path: str | None = None
    wp_url: str | None = None
    wp_user: str | None = None
    wp_timeout: float = 60.0

    # litespeed cache endpoint
    admin_ajax_path: str = "wp-admin/admin-ajax.php"
    ajax_action: str = "lscache_cli"
    action_key: str = "LSCWP_CTRL"
    nonce_key: str = "LSCWP_NONCE"
    purgeby_select_key: str = "purgeby"
    purgeby_list_key: str = "purgebylist"
    purgeby_codes: dict[str, str] = {"category": "0", "post_id": "1", "tag": "2"}

    # http
    request_timeout: float = 30.0
    verify_tls: bool = True
    ack_mode: Literal["body", "status"] = "body"
    http_auth_user: str | None = None
    http_auth_password: str | None = None

    # debug
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True) or None,
        env_prefix="lscache_",
        extra="ignore",
    )


env = EnvSettings()
