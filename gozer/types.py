"""Type definitions module for gozer."""

from __future__ import annotations

from typing import TypeAlias

JSON_TYPE: TypeAlias = "bool | dict[str, JSON_TYPE] | float | int | list[JSON_TYPE] | str | None"
