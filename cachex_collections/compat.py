"""Utilities for codec instantiation."""

from __future__ import annotations

from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

DEFAULT_CODEC = "cachex_collections.codecs.identity.IdentityCodec"
JSON_CODEC = "cachex_collections.codecs.json.JSONCodec"


def is_codec_instance(obj: Any) -> bool:
    """Check if an object is a codec instance (has encode/decode methods)."""
    if isinstance(obj, type):
        return False
    return hasattr(obj, "encode") and hasattr(obj, "decode") and callable(obj.encode) and callable(obj.decode)


def create_codec(config: str | type | Any | None, **kwargs: Any) -> Any:
    """Create a codec instance from config.

    Args:
        config: A dotted path string, a class, an instance, or None for the identity codec
        **kwargs: Keyword arguments to pass to the codec constructor

    Raises:
        ImproperlyConfigured: If the config does not resolve to a codec
    """
    # None means identity codec (values stored as given)
    if config is None:
        config = DEFAULT_CODEC

    # Already an instance
    if is_codec_instance(config):
        return config

    # A class (not a string path)
    if isinstance(config, type):
        codec = config(**kwargs)
    elif isinstance(config, str):
        try:
            cls = import_string(config)
        except ImportError as e:
            msg = f"Could not import codec '{config}': {e}"
            raise ImproperlyConfigured(msg) from e
        codec = cls(**kwargs)
    else:
        msg = f"Codec config must be a dotted path, a class or an instance, got {config!r}"
        raise ImproperlyConfigured(msg)

    if not is_codec_instance(codec):
        msg = f"{codec!r} is not a codec: encode() and decode() are required"
        raise ImproperlyConfigured(msg)
    return codec


def codec_for(use_json: bool, codec: str | type | Any | None = None) -> Any:
    """Resolve the codec of an adapter from its ``use_json`` flag and explicit override."""
    if codec is not None:
        return create_codec(codec)
    return create_codec(JSON_CODEC if use_json else None)
