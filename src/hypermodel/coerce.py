"""Normalization helpers for caller-supplied link payloads."""

from __future__ import annotations

from typing import Iterable

from loguru import logger
from pydantic import ValidationError

from .models.links import Link


def coerce_link(payload: Link | dict | str) -> Link:
    """Normalize one link payload into a ``Link``.

    Accepted shapes:
    1. ``Link`` instance (returned as is).
    2. Mapping validated as ``Link`` (``{"href": ..., "rel": ...}``).
    3. ``"rel=href"`` string.
    """
    if isinstance(payload, Link):
        return payload
    if isinstance(payload, dict):
        return Link.model_validate(payload)
    if isinstance(payload, str):
        rel, sep, href = payload.partition("=")
        if not sep or not rel.strip() or not href.strip():
            raise ValueError(f"Link must be formatted as rel=href, got {payload!r}")
        return Link.of(href.strip(), rel.strip())
    raise TypeError(f"Unsupported link payload type: {type(payload).__name__}")


def coerce_links_input(links: Iterable[Link | dict | str] | None) -> list[Link]:
    """Normalize a batch of link payloads, skipping invalid entries."""
    if not links:
        return []

    normalized: list[Link] = []
    for payload in links:
        try:
            normalized.append(coerce_link(payload))
        except (ValidationError, ValueError, TypeError) as exc:
            logger.warning(f"Invalid link payload ignored: {exc}")
    return normalized
