from __future__ import annotations

import enum
import json
import keyring


class ConfigKey(enum.StrEnum):
    HTTP_AUTH_USER = "HTTP_AUTH_USER"
    HTTP_AUTH_PASSWORD = "HTTP_AUTH_PASSWORD"


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "lscache-tools"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the configuration from the keyring."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        return cls(**json.loads(json_str))

    def http_auth(self) -> tuple[str, str] | None:
        """Basic auth credentials, if both halves are stored."""
        user = self.get(ConfigKey.HTTP_AUTH_USER)
        password = self.get(ConfigKey.HTTP_AUTH_PASSWORD)
        if not user or password is None:
            return None
        return user, password

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def to_keys_json(self) -> str:
        """Render the stored keys with their values masked."""
        result = {}
        for key in ConfigKey:
            if key in self:
                if self[ConfigKey(key)]:
                    # valid key
                    result[key] = "********"
                else:
                    # empty key
                    result[key] = ""
            else:
                # missing key
                result[key] = "(not set)"

        return json.dumps(result, indent=2)
