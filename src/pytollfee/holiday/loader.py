"""Holiday provider discovery from packaged manifests."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable

from ..exceptions import ConfigError
from ..models import HolidayProviderInfo

MANIFEST_FILENAME = "manifest.json"
SCHEMA_FILENAME = "manifest.schema.json"
_MANIFEST_CACHE: dict[str, ProviderManifest] | None = None


@dataclass(frozen=True, slots=True)
class ProviderManifest:
    id: str
    name: str
    default_base_url: str

    @property
    def info(self) -> HolidayProviderInfo:
        return HolidayProviderInfo(
            id=self.id,
            name=self.name,
            default_base_url=self.default_base_url,
        )


def _holiday_root() -> Traversable:
    return resources.files("pytollfee.holiday")


def load_manifest_schema() -> dict:
    return json.loads((_holiday_root() / SCHEMA_FILENAME).read_text(encoding="utf-8"))


def _manifest_field(data: dict, key: str, folder_name: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Holiday provider {folder_name!r}: {key} must be a non-empty string.")
    return value


def parse_manifest(data: object, folder_name: str) -> ProviderManifest:
    if not isinstance(data, dict):
        raise ConfigError(f"Holiday provider {folder_name!r}: manifest must be a JSON object.")
    manifest = ProviderManifest(
        id=_manifest_field(data, "id", folder_name),
        name=_manifest_field(data, "name", folder_name),
        default_base_url=_manifest_field(data, "default_base_url", folder_name),
    )
    # The client imports providers by folder name.
    if manifest.id != folder_name:
        raise ConfigError(f"Holiday provider {folder_name!r}: id does not match its folder.")
    if not manifest.default_base_url.startswith("https://"):
        raise ConfigError(f"Holiday provider {folder_name!r}: default_base_url must use https.")
    return manifest


def iter_manifest_files() -> Iterable[tuple[str, Traversable]]:
    for entry in _holiday_root().iterdir():
        manifest_path = entry / MANIFEST_FILENAME
        if entry.is_dir() and manifest_path.is_file():
            yield entry.name, manifest_path


def load_manifests() -> list[ProviderManifest]:
    global _MANIFEST_CACHE
    if _MANIFEST_CACHE is None:
        manifests: dict[str, ProviderManifest] = {}
        for folder_name, manifest_path in iter_manifest_files():
            try:
                data = json.loads(manifest_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Holiday provider {folder_name!r}: invalid JSON.") from exc
            manifests[folder_name] = parse_manifest(data, folder_name)
        _MANIFEST_CACHE = manifests
    return sorted(_MANIFEST_CACHE.values(), key=lambda manifest: manifest.id)


def clear_manifest_cache() -> None:
    """Forget discovered manifests so the next lookup rescans the package."""
    global _MANIFEST_CACHE
    _MANIFEST_CACHE = None


def list_providers() -> list[HolidayProviderInfo]:
    return [manifest.info for manifest in load_manifests()]


def get_manifest(provider_id: str) -> ProviderManifest:
    load_manifests()
    manifest = (_MANIFEST_CACHE or {}).get(provider_id)
    if manifest is None:
        raise ConfigError(f"Holiday provider {provider_id!r} not found.")
    return manifest
