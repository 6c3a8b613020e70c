# dotrepl.runtime - Value model and interpreter
from dotrepl.runtime.interpreter import Interpreter
from dotrepl.runtime.values import (
    ABSENT,
    NO_VALUE,
    PythonValueModel,
    SyntheticScope,
    ValueModel,
)

__all__ = [
    "Interpreter",
    "ABSENT",
    "NO_VALUE",
    "PythonValueModel",
    "SyntheticScope",
    "ValueModel",
]
