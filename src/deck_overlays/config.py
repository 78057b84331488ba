"""Configuration management for the deck overlay generator."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML file and return its contents."""
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    
    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, overlay taking precedence."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration manager that loads and merges main and style configs."""
    
    def __init__(self, config_path: str = 'configs/config.yaml'):
        """Initialize configuration by loading main config and style config.
        
        Args:
            config_path: Path to main configuration file
        """
        self.config_path = Path(config_path)
        config_dir = self.config_path.parent
        
        main_config = load_yaml_file(self.config_path)
        
        # Set up project_root from paths.project_root if present
        paths_config = main_config.get('paths', {})
        if 'project_root' in paths_config:
            self.project_root = (config_dir / paths_config['project_root']).resolve()
        else:
            self.project_root = Path.cwd()
        
        self._paths = paths_config
        self._config = self._load_configuration(main_config)
        self._setup_logging()
    
    @classmethod
    def from_dict(cls, main_config: Dict[str, Any], config_dir: Path | None = None) -> "Config":
        """Create Config instance from dictionary (for Streamlit and tests).
        
        Args:
            main_config: Configuration dictionary (already loaded)
            config_dir: Directory used for relative path resolution
            
        Returns:
            Configured Config instance
        """
        config = cls.__new__(cls)
        config_dir = config_dir or Path.cwd()
        config.config_path = config_dir / "config.yaml"  # Virtual path
        
        paths_config = main_config.get('paths', {})
        if 'project_root' in paths_config:
            config.project_root = (config_dir / paths_config['project_root']).resolve()
        else:
            config.project_root = Path.cwd()
        
        config._paths = paths_config
        config._config = config._load_configuration(main_config)
        config._setup_logging()
        return config
    
    def _resolve_path_value(self, value: str) -> Path:
        """Resolve a path value relative to project_root if not absolute.
        
        Args:
            value: Path string to resolve
            
        Returns:
            Resolved Path object
        """
        if not value:
            return Path()
        p = Path(value)
        if not p.is_absolute():
            return self.project_root / p
        return p.resolve()
    
    def _load_configuration(self, main_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge the optional style config underneath the main config.
        
        Args:
            main_config: Already loaded main configuration dictionary
            
        Returns:
            Merged configuration dictionary
        """
        style_value = main_config.get('paths', {}).get('style_config', '')
        style_config_path = self._resolve_path_value(style_value) if style_value else None
        
        if style_config_path and style_config_path.exists():
            style_config = load_yaml_file(style_config_path)
            # Style config is the base, main config overlays
            merged = merge_dicts(style_config, main_config)
            logging.debug(f"Loaded style config from: {style_config_path}")
        else:
            merged = merge_dicts({}, main_config)
        
        self._paths = merged.get('paths', {})
        logging.debug(f"Loaded main config from: {self.config_path}")
        
        return merged
    
    def _setup_logging(self):
        """Setup logging based on configuration."""
        log_level = self.get('settings.logging.level', 'INFO')
        numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
        logging.basicConfig(
            level=numeric_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    
    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path to config value (e.g., 'palette.accent')
            default: Default value if key not found
            
        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self._config
        
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        
        return value
    
    def set(self, key_path: str, value: Any) -> None:
        """Set a configuration value using dot notation, creating sections as needed."""
        keys = key_path.split('.')
        target = self._config
        for key in keys[:-1]:
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
        target[keys[-1]] = value
        if keys[0] == 'paths':
            self._paths = self._config['paths']
    
    def get_path(self, key: str) -> Path:
        """Get a path from configuration, resolved relative to project_root.
        
        Args:
            key: Path key in config (e.g., 'input', 'output')
            
        Returns:
            Resolved Path object
        """
        path_str = self._paths.get(key)
        if path_str is None:
            raise ValueError(f"Path '{key}' not found in configuration")
        return self._resolve_path_value(path_str)
    
    def validate_paths(self):
        """Validate the inputs required by the configured backend."""
        if self.backend == 'google':
            if not self.get('google.presentation_id'):
                raise ValueError("google.presentation_id is required for the google backend")
            return
        
        try:
            input_path = self.get_path('input')
        except ValueError:
            raise FileNotFoundError("Required files not found:\n  - input: not configured")
        if not input_path.exists():
            raise FileNotFoundError(f"Required files not found:\n  - input: {input_path}")
    
    @property
    def backend(self) -> str:
        """Name of the document backend ('pptx' or 'google')."""
        backend = self.get('backend', 'pptx')
        if backend not in ('pptx', 'google'):
            raise ValueError(f"Unknown backend '{backend}'. Expected 'pptx' or 'google'")
        return backend
    
    @property
    def input_path(self) -> Path:
        """Get input PowerPoint file path."""
        return self.get_path('input')
    
    @property
    def output_path(self) -> Path:
        """Get output PowerPoint file path (defaults to the input path)."""
        if self._paths.get('output'):
            return self.get_path('output')
        return self.input_path
    
    @property
    def palette(self) -> Dict[str, str]:
        """Named hex colors used by the overlay generators."""
        return dict(self.get('palette', {}) or {})
