"""
Demo registry with automatic discovery.

The registry discovers every concrete Demo subclass in the demos/ package
and provides lookup by name or by primitive. Demos register themselves by
being defined; there is no hand-maintained list.
"""

import importlib
import inspect
import logging
import pkgutil
from pathlib import Path

from demos.base import Demo

logger = logging.getLogger(__name__)


class DemoRegistry:
    """
    Registry for catalog demos with automatic discovery.

    Usage:
        registry = DemoRegistry()
        registry.discover()

        demo = registry.get("gather_all_with_rejection")
        result = await demo(config)
    """

    def __init__(self):
        self._demos: dict[str, Demo] = {}

    def register(self, demo: Demo) -> None:
        """
        Register a demo instance.

        Raises:
            ValueError: If a demo with the same name is already registered
        """
        if demo.name in self._demos:
            raise ValueError(f"Demo '{demo.name}' is already registered")

        self._demos[demo.name] = demo

    def get(self, name: str) -> Demo | None:
        """Get demo by name, or None if not found."""
        return self._demos.get(name)

    def list_demos(self) -> list[dict]:
        """List all registered demos as dicts, in registration order."""
        return [demo.to_dict() for demo in self._demos.values()]

    def by_primitive(self, primitive: str) -> list[Demo]:
        """All demos exercising ``primitive``, in registration order."""
        return [demo for demo in self._demos.values() if demo.primitive == primitive]

    def discover(self, package_name: str = "demos") -> int:
        """
        Auto-discover all Demo subclasses in package.

        Only classes defined in the scanned module itself are registered,
        so a demo imported elsewhere is not registered twice.

        Args:
            package_name: Package to scan (default: "demos")

        Returns:
            Number of demos discovered
        """
        count = 0

        try:
            package = importlib.import_module(package_name)
        except ImportError:
            return 0

        if not hasattr(package, "__path__"):
            return 0

        package_path = Path(package.__path__[0])

        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            [str(package_path)], prefix=f"{package_name}."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("DemoRegistry: skipping %s (%s)", module_name, exc)
                continue

            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if obj is Demo or obj.__module__ != module.__name__:
                    continue
                if issubclass(obj, Demo) and not inspect.isabstract(obj):
                    self.register(obj())
                    count += 1

        return count

    def __len__(self) -> int:
        """Return number of registered demos."""
        return len(self._demos)

    def __contains__(self, name: str) -> bool:
        """Check if demo is registered."""
        return name in self._demos


# Global registry instance
_registry: DemoRegistry | None = None


def get_registry() -> DemoRegistry:
    """
    Get global demo registry singleton.

    Auto-discovers demos on first call.
    """
    global _registry
    if _registry is None:
        _registry = DemoRegistry()
        _registry.discover()
    return _registry
