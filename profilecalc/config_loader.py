"""
Configuration loader for profilecalc.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class CalculationConfig:
    """Calculation defaults."""
    length_unit: str = "mm"
    weight_unit: str = "kg"
    use_temperature_effects: bool = False


@dataclass
class ReportConfig:
    """Report output parameters."""
    output_dir: str = "reports"
    decimals: int = 4


@dataclass
class PlotConfig:
    """Cross-section plot parameters."""
    dpi: int = 100
    line_width: float = 1.5
    fill_color: str = "#9DB4C0"
    edge_color: str = "#253237"


@dataclass
class LoggingConfig:
    """Logging parameters."""
    level: str = "INFO"
    file: Optional[str] = None
    console: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    calculation: CalculationConfig = field(default_factory=CalculationConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, searches default locations.

    Returns:
        AppConfig instance (defaults when no file is found)
    """
    search_paths = []
    if config_path:
        search_paths.append(Path(config_path))

    search_paths.extend([
        Path("config.yaml"),
        Path(__file__).parent.parent / "config.yaml",
        Path.home() / ".profilecalc" / "config.yaml"
    ])

    for path in search_paths:
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            logger.info(f"Configuration loaded from: {path}")
            return _parse_config(data or {})

    logger.debug("No config.yaml found. Using default configuration.")
    return AppConfig()


def _parse_config(data: Dict[str, Any]) -> AppConfig:
    """Parse YAML data into AppConfig."""
    config = AppConfig()

    if 'calculation' in data:
        calc = data['calculation']
        config.calculation = CalculationConfig(
            length_unit=calc.get('length_unit', 'mm'),
            weight_unit=calc.get('weight_unit', 'kg'),
            use_temperature_effects=calc.get('use_temperature_effects', False)
        )

    if 'report' in data:
        rep = data['report']
        config.report = ReportConfig(
            output_dir=rep.get('output_dir', 'reports'),
            decimals=rep.get('decimals', 4)
        )

    if 'plot' in data:
        plot = data['plot']
        config.plot = PlotConfig(
            dpi=plot.get('dpi', 100),
            line_width=plot.get('line_width', 1.5),
            fill_color=plot.get('fill_color', '#9DB4C0'),
            edge_color=plot.get('edge_color', '#253237')
        )

    if 'logging' in data:
        log = data['logging']
        config.logging = LoggingConfig(
            level=log.get('level', 'INFO'),
            file=log.get('file'),
            console=log.get('console', True)
        )

    return config


# Global config instance (lazy loaded)
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
