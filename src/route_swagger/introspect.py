"""Action introspection: import an action and read what it declares.

Actions are named ``package.module.Class@method``. The method's docstring
is its doc comment. A parameter annotated with a class exposing a
``rules()`` method is the bound validation request; its rules map field
names to rule lists or ``|``-delimited rule strings.

Closure actions, unimportable modules and missing attributes are lookup
misses and yield empty values.
"""

import importlib
import inspect
import logging
import typing
from typing import Protocol

logger = logging.getLogger(__name__)


class ActionIntrospector(Protocol):
    def doc_comment(self, action: str) -> str: ...

    def validation_rules(self, action: str) -> dict[str, list[str] | str]: ...


class ImportingIntrospector:
    def resolve(self, action: str):
        """Return the callable behind an action, or None when it cannot be found."""
        class_path, sep, method_name = action.partition("@")
        if not sep or not method_name:
            logger.debug("Action %s is not a Class@method reference", action)
            return None

        module_name, _, class_name = class_path.rpartition(".")
        if not module_name:
            logger.debug("Action %s has no module path", action)
            return None

        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.debug("Cannot import %s: %s", module_name, e)
            return None
        except Exception as e:
            logger.warning("Importing %s failed: %s", module_name, e)
            return None

        cls = getattr(module, class_name, None)
        method = getattr(cls, method_name, None) if cls is not None else None
        if method is None or not callable(method):
            logger.debug("Action %s does not resolve to a method", action)
            return None
        return method

    def doc_comment(self, action: str) -> str:
        method = self.resolve(action)
        if method is None:
            return ""
        return method.__doc__ or ""

    def validation_rules(self, action: str) -> dict[str, list[str] | str]:
        method = self.resolve(action)
        if method is None:
            return {}

        request_class = self._request_class(method)
        if request_class is None:
            return {}
        try:
            return dict(request_class().rules())
        except Exception as e:
            logger.warning("Could not read rules of %s for %s: %s", request_class.__name__, action, e)
            return {}

    def _request_class(self, method) -> type | None:
        try:
            hints = typing.get_type_hints(method)
        except (NameError, TypeError) as e:
            logger.debug("Cannot resolve annotations of %s: %s", method, e)
            hints = {}

        for name, param in inspect.signature(method).parameters.items():
            annotation = hints.get(name, param.annotation)
            if inspect.isclass(annotation) and callable(getattr(annotation, "rules", None)):
                return annotation
        return None
