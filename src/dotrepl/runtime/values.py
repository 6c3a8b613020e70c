# dotrepl.runtime.values - Value model capability interface
"""
The small slice of the object model that completion and result printing
need: attribute lookup, member listing, callability and representation.

Completion code only talks to a ValueModel, never to Python objects
directly, so any object graph that provides these four capabilities can be
completed against.
"""
import types
from typing import Any, Iterable, Optional, Protocol


class _Sentinel:
    """Named singleton marker."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


# Returned by get_attribute when a name does not resolve
ABSENT = _Sentinel("ABSENT")

# Returned by the interpreter when a statement produces nothing to print
NO_VALUE = _Sentinel("NO_VALUE")

# User functions, bound methods, and functions implemented natively
CALLABLE_KINDS = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
    types.MethodDescriptorType,
    types.WrapperDescriptorType,
    types.MethodWrapperType,
    types.ClassMethodDescriptorType,
)


class SyntheticScope:
    """
    Throwaway namespace holding names only.

    Used for the keyword list and the loaded-module list during a single
    completion request. Every name maps to None; only the names matter.
    """

    def __init__(self, label: str, names: Iterable[str]):
        self.label = label
        self._names: dict[str, None] = dict.fromkeys(names)

    def names(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"<SyntheticScope {self.label} ({len(self)} names)>"


class ValueModel(Protocol):
    """Capabilities the completion engine requires from the host runtime."""

    def get_attribute(self, value: Any, name: str) -> Any:
        ...

    def list_members(self, value: Any) -> Any:
        ...

    def is_callable_kind(self, value: Any) -> bool:
        ...

    def represent(self, value: Any) -> Optional[str]:
        ...


class PythonValueModel:
    """ValueModel over live Python objects."""

    def get_attribute(self, value: Any, name: str) -> Any:
        """
        Look up an attribute by name.

        Returns:
            The attribute, or ABSENT when it is missing or its lookup fails
        """
        if isinstance(value, SyntheticScope):
            return None if name in value else ABSENT
        try:
            return getattr(value, name)
        except Exception:
            # Properties and __getattr__ hooks may raise anything
            return ABSENT

    def list_members(self, value: Any) -> Any:
        """
        Enumerate member names.

        Returns whatever the object's own dir() hook returns; the caller
        checks that it is a list.
        """
        if isinstance(value, SyntheticScope):
            return value.names()
        try:
            return dir(value)
        except Exception:
            return None

    def is_callable_kind(self, value: Any) -> bool:
        """True for functions, bound methods and native functions."""
        return isinstance(value, CALLABLE_KINDS)

    def represent(self, value: Any) -> Optional[str]:
        """
        Text for showing a result: repr(), then str(), then None.
        """
        for convert in (repr, str):
            try:
                text = convert(value)
            except Exception:
                continue
            if isinstance(text, str):
                return text
        return None
