"""
Herald configuration value.

A Config is an immutable bundle of the behavior and formatting choices the
dispatcher and the failure reporter need. It is created once by the host and
passed explicitly (Dispatcher → Context); nothing reads configuration from
module-level state.

Fields (defaults in parentheses)
- prefix (";;"): text a message must start with to address the bot. Non-empty, no spaces.
- mention_as_prefix (True): mentioning the bot works in place of the prefix.
- theme_color ("#574b90"): hex colour used by renderers that support colour.
- give_context_on_error (True): show the command's usage after a failed parse.
- zero_indexed (False): argument positions in failure messages start at 0 instead of 1.
- notice_on_mention (False): reply to unknown commands addressed by mention.
- notice_on_prefix (True): reply to unknown commands addressed by prefix.

Loading
- Config.from_mapping(data) accepts snake_case or camelCase keys (as found in
  JSON/YAML files), fills defaults, and rejects unknown keys with KeyError.
"""
import re
from collections.abc import Mapping

from .utils import *


def _sanitize_config(cls, metadata, /):
    """
    Internal: validate and normalize configuration values in place.

    Raises
    - TypeError: when a value has the wrong type.
    - ValueError: when a string value has the wrong shape.
    """
    if not isinstance(prefix := metadata["prefix"], str):
        raise TypeError(f"{cls.__typename__} 'prefix' must be a string")
    elif not (prefix := prefix.strip()):
        raise ValueError(f"{cls.__typename__} 'prefix' cannot be empty")
    elif re.search(r"\s", prefix):
        raise ValueError(f"{cls.__typename__} 'prefix' cannot contain whitespace")
    metadata["prefix"] = prefix

    if not isinstance(color := metadata["theme_color"], str):
        raise TypeError(f"{cls.__typename__} 'theme_color' must be a string")
    elif not re.fullmatch(r"#[0-9a-fA-F]{6}", color):
        raise ValueError(f"{cls.__typename__} 'theme_color' must be a hex colour like '#574b90'")

    for name in cls.__switches__:
        if not isinstance(metadata[name], bool):
            raise TypeError(f"{cls.__typename__} {name!r} must be a boolean")


class Config:
    """
    Immutable, validated configuration value.
    """

    __typename__ = "config"
    __switches__ = (
        "mention_as_prefix",
        "give_context_on_error",
        "zero_indexed",
        "notice_on_mention",
        "notice_on_prefix",
    )
    __introspectable__ = ("prefix", "theme_color") + __switches__

    prefix = mirror("prefix")
    theme_color = mirror("theme_color")
    mention_as_prefix = mirror("mention_as_prefix")
    give_context_on_error = mirror("give_context_on_error")
    zero_indexed = mirror("zero_indexed")
    notice_on_mention = mirror("notice_on_mention")
    notice_on_prefix = mirror("notice_on_prefix")

    def __init__(
            self,
            prefix=";;",
            /,
            *,
            mention_as_prefix=True,
            theme_color="#574b90",
            give_context_on_error=True,
            zero_indexed=False,
            notice_on_mention=False,
            notice_on_prefix=True,
    ):
        metadata = {
            "prefix": prefix,
            "theme_color": theme_color,
            "mention_as_prefix": mention_as_prefix,
            "give_context_on_error": give_context_on_error,
            "zero_indexed": zero_indexed,
            "notice_on_mention": notice_on_mention,
            "notice_on_prefix": notice_on_prefix,
        }
        _sanitize_config(type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @classmethod
    def from_mapping(cls, data, /):
        """
        build a Config from a plain mapping (e.g., a parsed JSON/YAML document).

        keys may be snake_case ("give_context_on_error") or camelCase
        ("giveContextOnError"); a nested "invalidCommandNotice" mapping with
        "mention"/"prefix" booleans is also understood. missing keys take
        their defaults; unknown keys raise KeyError.
        """
        if not isinstance(data, Mapping):
            raise TypeError("config.from_mapping() argument must be a mapping")

        options = {}
        for key, value in data.items():
            if key == "invalidCommandNotice":
                if not isinstance(value, Mapping):
                    raise TypeError("config 'invalidCommandNotice' must be a mapping")
                for scope, enabled in value.items():
                    if scope not in ("mention", "prefix"):
                        raise KeyError("config 'invalidCommandNotice' has no %r entry" % scope)
                    options["notice_on_" + scope] = enabled
                continue
            name = re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()
            if name not in cls.__introspectable__:
                raise KeyError("config has no %r setting" % key)
            options[name] = value

        prefix = options.pop("prefix", Unset)
        return cls(*([prefix] if prefix is not Unset else []), **options)

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__introspectable__)

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in self.__introspectable__))

    def __repr__(self):
        return "config(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "Config",
)
