from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable


logger = logging.getLogger(__name__)

# In-process registry of tool metadata, filled as tool modules register
REGISTERED_TOOL_SPECS: list[dict] = []
_TOOL_KEYS: set[str] = set()


def _extract_parameters(fn: Callable) -> list[dict]:
	params: list[dict] = []
	sig = inspect.signature(fn)
	for name, param in sig.parameters.items():
		if name in {"ctx", "context"}:
			continue
		info: dict[str, object] = {"name": name, "required": param.default is inspect.Parameter.empty}
		if param.default is not inspect.Parameter.empty:
			info["default"] = param.default
		params.append(info)
	return params


def _register_tool_meta(name: str, description: str, module: str, *, parameters: list[dict] | None = None) -> None:
	"""Record tool metadata without duplicating entries."""
	key = f"{module}:{name}"
	if key in _TOOL_KEYS:
		for entry in REGISTERED_TOOL_SPECS:
			if entry.get("module") == module and entry.get("name") == name:
				if parameters is not None:
					entry["parameters"] = parameters
				return
	_TOOL_KEYS.add(key)
	record: dict[str, object] = {"name": name, "description": description, "module": module}
	if parameters is not None:
		record["parameters"] = parameters
	REGISTERED_TOOL_SPECS.append(record)


def _iter_tool_modules() -> list[ModuleType]:
	modules: list[ModuleType] = []
	package = importlib.import_module(__name__)
	for _, name, _ in pkgutil.iter_modules(package.__path__, __name__ + "."):
		modules.append(importlib.import_module(name))
	return modules


def auto_register_tools(mcp: object) -> None:
	"""Register every tool module in this package that exposes register(mcp)."""
	for mod in _iter_tool_modules():
		register: Callable | None = getattr(mod, "register", None)
		if callable(register):
			logger.debug("Registering tools from %s", mod.__name__)
			register(mcp)


def get_registered_tool_specs() -> list[dict]:
	"""Return a copy of the registered tool specs (deduplicated)."""
	return list(REGISTERED_TOOL_SPECS)
