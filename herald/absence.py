"""
Absent-value marker for optional arguments.

This module defines a process-wide singleton `absent` and its type `absenttype`.
An optional argument handler that finds no token left yields `absent`, and the
pipeline passes it to the command action in that argument's slot, so the
action always receives one value per declared argument.

Semantics
- Falsy: bool(absent) is False, so `if value:` reads naturally in actions.
- Distinct: absent is not None, not False, and not an empty string; an action
  can tell “not given” from any parsed value with `value is absent`.
- Stable string form: repr(absent) == "absent" (and Rich uses a dim style).
- Identity: absenttype() always returns the same instance per interpreter,
  including across copy/deepcopy/pickle.

Typical usage
    async def greet(context, name):
        name = absent.fill(name, "stranger")
        ...
"""
import functools

from rich.text import Text


class absenttype:
    """
    Singleton type of the absent-value marker.

    Notes
    - This type is final; subclassing is blocked to preserve semantics.
    - Instances are singletons per interpreter process.
    """

    @functools.cache
    def __new__(cls):
        """
        Return the unique instance of absenttype (per process).
        """
        return super().__new__(cls)

    def fill(self, object, default=None, /):
        """
        Replace the marker with a concrete default; pass through other objects.

        Returns
        - default when `object is self`, otherwise `object` unchanged
          (None and other falsy values are preserved).
        """
        if object is self:
            return default
        return object

    def __bool__(self):
        return False

    def __rich__(self):
        """
        Rich protocol hook: render a dim 'absent' token.
        """
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "absent"

    def __reduce__(self):
        # Unpickles through the cached constructor, preserving identity.
        return type(self), ()

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __init_subclass__(cls, **options):
        raise TypeError("type 'absenttype' is not an acceptable base type")


absent = absenttype()


__all__ = (
    "absenttype",
    "absent",
)
