import importlib
import pkgutil
from typing import Any

from agent_toolbox.tools import definitions
from agent_toolbox.tools.groups import TOOL_GROUPS
from agent_toolbox.tools.tool_models import ToolSpec

_DEFINITIONS_PREFIX = f"{definitions.__name__}."


def _iter_definition_specs():
    """Yield (module name, ToolSpec) for every definitions module exposing ``tool``."""
    for module_info in pkgutil.walk_packages(definitions.__path__, _DEFINITIONS_PREFIX):
        if module_info.ispkg:
            continue
        spec = getattr(importlib.import_module(module_info.name), "tool", None)
        if isinstance(spec, ToolSpec):
            yield module_info.name, spec


class ToolRegistry:
    """Looks up tools declared in the 'definitions' package and builds them on demand."""

    _specs: dict[str, ToolSpec] | None = None

    @classmethod
    def _load(cls) -> dict[str, ToolSpec]:
        if cls._specs is None:
            specs: dict[str, ToolSpec] = {}
            for module_name, spec in _iter_definition_specs():
                if spec.name in specs:
                    raise ValueError(
                        f"Duplicate tool name detected: {spec.name} (module {module_name})"
                    )
                specs[spec.name] = spec
            cls._specs = specs
        return cls._specs

    @classmethod
    def list_specs(cls) -> list[ToolSpec]:
        return list(cls._load().values())

    @classmethod
    def list_all_tools(cls) -> list[str]:
        return list(cls._load())

    @classmethod
    def get_spec(cls, name: str) -> ToolSpec:
        try:
            return cls._load()[name]
        except KeyError:
            raise ValueError(f"Unknown tool(s): {name}") from None

    @classmethod
    def list_groups(cls) -> dict[str, list[str]]:
        """Central groups plus any group a ToolSpec declares for itself."""
        groups = {name: list(members) for name, members in TOOL_GROUPS.items()}
        for spec in cls._load().values():
            for group_name in spec.groups:
                members = groups.setdefault(group_name, [])
                if spec.name not in members:
                    members.append(spec.name)
        return groups

    @classmethod
    def resolve_tool_names(
        cls, tool_names: list[str], group_names: list[str]
    ) -> list[str]:
        groups = cls.list_groups()
        unknown = [name for name in group_names if name not in groups]
        if unknown:
            raise ValueError(f"Unknown tool group: {', '.join(unknown)}")
        merged = [tool for name in group_names for tool in groups[name]]
        # First occurrence wins, so the order stays deterministic.
        return list(dict.fromkeys(merged + list(tool_names)))

    @classmethod
    def get_tools(
        cls, tool_names: list[str], group_names: list[str] | None = None
    ) -> list[Any]:
        resolved = cls.resolve_tool_names(tool_names, group_names or [])
        specs = cls._load()
        missing = [name for name in resolved if name not in specs]
        if missing:
            raise ValueError(f"Unknown tool(s): {', '.join(missing)}")
        return [specs[name].builder() for name in resolved]

    @classmethod
    def get_status_message(cls, tool_name: str) -> str:
        spec = cls._load().get(tool_name)
        if spec is not None and spec.status_message:
            return spec.status_message
        return f"Using {tool_name}..."
