import json
import os
from pathlib import Path
from dataclasses import dataclass

from core.log_utils import log

CONFIG_FILE = Path(__file__).parent.parent / "config.json"

# Zmienne środowiskowe nadpisujące wartości z config.json
ENV_OVERRIDES = {
    "supabase_url": "SUPABASE_URL",
    "supabase_key": "SUPABASE_ANON_KEY",
    "host": "FORUM_HOST",
    "port": "FORUM_PORT",
    "storage_secret": "FORUM_STORAGE_SECRET",
}


@dataclass
class AppConfig:
    """Model konfiguracji aplikacji."""
    supabase_url: str = ""
    supabase_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8080
    storage_secret: str = "forum_app_secret_key"
    title: str = "Forum App"

    @property
    def has_backend(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


class ConfigManager:
    """Ładuje konfigurację z config.json i zmiennych środowiskowych."""

    def __init__(self, config_path: Path = CONFIG_FILE, environ: dict = None):
        self.config_path = config_path
        self._environ = os.environ if environ is None else environ
        self._config: AppConfig = self._load()

    def _load(self) -> AppConfig:
        """Ładuje konfigurację z pliku (lub domyślną) i nakłada zmienne środowiskowe."""
        config = AppConfig()
        if self.config_path.exists():
            try:
                data = json.loads(self.config_path.read_text(encoding='utf-8'))
                # Filtrujemy tylko znane pola, zeby nie psuc sie przy smieciach
                valid_keys = AppConfig.__annotations__.keys()
                filtered_data = {k: v for k, v in data.items() if k in valid_keys}
                config = AppConfig(**filtered_data)
            except (OSError, ValueError, TypeError) as e:
                log("[CONFIG] Błąd ładowania configu", e)

        for key, env_name in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if not value:
                continue
            if key == "port":
                try:
                    value = int(value)
                except ValueError:
                    log(f"[CONFIG] Niepoprawny {env_name}={value!r}, zostawiam {config.port}")
                    continue
            setattr(config, key, value)
        return config

    @property
    def config(self) -> AppConfig:
        return self._config
