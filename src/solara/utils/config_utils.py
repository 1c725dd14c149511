"""
Configuration management utilities for Solara
"""

import logging
import os
import json
from typing import Optional
from dotenv import load_dotenv

from solara.models.config import SolaraConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "solara_config.json"


class ConfigManager:
    """Utility class for managing configuration and environment setup"""

    @staticmethod
    def load_environment():
        """Load environment variables from .env file"""
        load_dotenv()

    @staticmethod
    def default_config_path() -> str:
        """Config path from SOLARA_CONFIG_PATH, else next to the project root"""
        env_path = os.getenv("SOLARA_CONFIG_PATH")
        if env_path:
            return env_path
        return os.path.join(
            os.path.dirname(
                os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
            ),
            CONFIG_FILENAME,
        )

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> SolaraConfig:
        """Load device configuration from JSON file"""
        config_path = config_path or ConfigManager.default_config_path()

        try:
            with open(config_path, "r") as f:
                config_data = json.load(f)
            config = SolaraConfig(**config_data)
            logger.info(f"Loaded configuration for {len(config.devices)} devices")
            return config
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    @staticmethod
    def override_refraction_config(config: SolaraConfig) -> SolaraConfig:
        """Override the refraction atmosphere with environment variables"""
        pressure = os.getenv("SOLARA_PRESSURE_HPA")
        temperature = os.getenv("SOLARA_TEMPERATURE_C")

        updates = {}
        if pressure:
            updates["pressure_hpa"] = float(pressure)
        if temperature:
            updates["temperature_c"] = float(temperature)

        if updates:
            config.refraction = config.refraction.model_copy(update=updates)
            logger.debug(f"Refraction overridden from environment: {updates}")

        return config

    @staticmethod
    def get_config_summary(config: SolaraConfig) -> dict:
        """Get a summary of the current configuration for logging/debugging"""
        return {
            "total_devices": len(config.devices),
            "device_names": [device.name for device in config.devices],
            "pressure_hpa": config.refraction.pressure_hpa,
            "temperature_c": config.refraction.temperature_c,
        }
