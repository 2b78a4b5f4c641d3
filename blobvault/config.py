import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORAGE_ROOT = "./data"
DEFAULT_ACCESS_DOMAIN = "https://ycz0926.site/assets"


@dataclass(frozen=True)
class AppConfig:
    storage_root: Path
    access_domain: str = DEFAULT_ACCESS_DOMAIN
    log_level: str = "INFO"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 15000

    def __post_init__(self) -> None:
        # Descriptors are joined with "/", keep them free of "//".
        object.__setattr__(self, "access_domain", self.access_domain.rstrip("/"))


def load_config() -> AppConfig:
    return AppConfig(
        storage_root=Path(os.environ.get("STORAGE_ROOT", DEFAULT_STORAGE_ROOT)),
        access_domain=os.environ.get("ACCESS_DOMAIN", DEFAULT_ACCESS_DOMAIN),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        host=os.environ.get("HOST", "0.0.0.0"),  # noqa: S104
        port=int(os.environ.get("PORT", "15000")),
    )
