"""Configuration management for CLI"""

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Dict

import yaml

from parcel import constants
from parcel_cli.utils.exceptions import ConfigurationError


# Configuration file location
CONFIG_DIR = Path.home() / ".parcel"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


@dataclass
class Profile:
    """Configuration profile"""
    catalog_service_url: str = constants.CATALOG_SERVICE_URL
    namespace: str = constants.VOLUME_NAMESPACE
    kubernetes_config_path: Optional[str] = None
    trace: bool = False

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "Profile":
        """Build a profile, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


class Config:
    """Configuration manager"""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else CONFIG_FILE
        self.profiles: Dict[str, Profile] = {}
        self.default_profile = "default"
        self.load()

    def exists(self) -> bool:
        """Whether the configuration file exists"""
        return self.config_file.exists()

    def load(self):
        """Load configuration from file"""
        if not self.config_file.exists():
            # Create default profile
            self.profiles["default"] = Profile()
            return

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(self.config_file, f"could not be read: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(self.config_file, "must contain a mapping")

        self.default_profile = data.get("default_profile", "default")
        for name, profile_data in (data.get("profiles") or {}).items():
            self.profiles[name] = Profile.from_dict(profile_data)

        # Ensure default profile exists
        if self.default_profile not in self.profiles:
            self.profiles[self.default_profile] = Profile()

    def save(self):
        """Save configuration to file"""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "default_profile": self.default_profile,
            "profiles": {
                name: profile.to_dict()
                for name, profile in self.profiles.items()
            }
        }

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

    def get_profile(self, name: Optional[str] = None) -> Profile:
        """
        Get profile by name or default

        # Arguments
            name: Profile name, defaults to default_profile

        # Returns
            Profile object
        """
        profile_name = name or self.default_profile

        if profile_name not in self.profiles:
            # Create new profile with defaults
            self.profiles[profile_name] = Profile()

        return self.profiles[profile_name]

    def add_profile(self, name: str, profile: Profile):
        """
        Add or update a profile

        # Arguments
            name: Profile name
            profile: Profile object
        """
        self.profiles[name] = profile

    def delete_profile(self, name: str):
        """
        Delete a profile

        # Arguments
            name: Profile name
        """
        if name in self.profiles:
            del self.profiles[name]
            # If deleted profile was default, switch to 'default'
            if self.default_profile == name:
                self.default_profile = "default"
                if "default" not in self.profiles:
                    self.profiles["default"] = Profile()

    def set_default_profile(self, name: str):
        """
        Set default profile

        # Arguments
            name: Profile name
        """
        if name not in self.profiles:
            self.profiles[name] = Profile()
        self.default_profile = name
