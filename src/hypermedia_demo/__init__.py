from hypermedia_demo.config import DemoConfig, load_demo_config
from hypermedia_demo.home import DemoPaths, ensure_demo_layout, resolve_demo_home

__version__ = "0.1.0"

__all__ = [
    "DemoConfig",
    "DemoPaths",
    "__version__",
    "ensure_demo_layout",
    "load_demo_config",
    "resolve_demo_home",
]
