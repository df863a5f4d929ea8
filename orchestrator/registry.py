from typing import Dict, Optional, Any
import importlib
from pathlib import Path

from loguru import logger
import yaml

DEFAULT_COMPONENTS_PATH = Path(__file__).resolve().parents[1] / "apps" / "configs" / "components.yaml"


class Registry:
    """Builds pluggable components (the suggestion adapter) from YAML config.

    Each top-level section names a component::

        suggester:
          module: generation.models.adapters.openai_compat
          class: OpenAICompatibleAdapter
          config:
            model: gemini-2.5-flash

    Instances are created on first ``get`` and cached. Tests swap a component
    in with ``register``.
    """

    def __init__(self, config_path: Optional[Path] = None, config: Optional[Dict[str, Any]] = None):
        self.components: Dict[str, Any] = {}
        self.config_path = config_path or DEFAULT_COMPONENTS_PATH
        self.logger = logger
        self.config = config if config is not None else self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.error(f"Component config not found: {self.config_path}")
            raise

    def register(self, name: str, component: Any) -> None:
        self.components[name] = component

    def get(self, name: str) -> Any:
        """Get a component instance, creating it if needed."""
        if name in self.components:
            return self.components[name]

        if name in self.config:
            component = self._create_component(self.config[name])
            self.components[name] = component
            self.logger.info(f"Created component '{name}' ({type(component).__name__})")
            return component

        raise ValueError(f"Component '{name}' not found in registry or config")

    def _create_component(self, config: Dict[str, Any]) -> Any:
        """Create component from configuration."""
        try:
            module_path = config["module"]
            class_name = config["class"]
            component_config = config.get("config") or {}

            module = importlib.import_module(module_path)
            component_class = getattr(module, class_name)

            return component_class(**component_config)

        except Exception as e:
            raise ValueError(f"Failed to create component: {e}") from e

    def list_components(self) -> Dict[str, str]:
        """List instantiated components by type name."""
        return {name: type(comp).__name__ for name, comp in self.components.items()}

    def list_config_sections(self) -> list:
        return sorted(self.config.keys())

    def reload_config(self, config_path: Optional[str] = None) -> None:
        """Reload configuration and clear cached components."""
        if config_path:
            self.config_path = config_path
        self.config = self._load_config()
        self.components.clear()
