"""Dataclass models for the result of classifying a single INI line."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Comment:
    text: str = ""


@dataclass(frozen=True)
class Section:
    name: str = ""


@dataclass(frozen=True)
class Option:
    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Invalid:
    """Line matching no known form; the driver attaches the line number."""
    line: str = ""
    reason: str = ""


LineKind = Union[Comment, Section, Option, Blank, Invalid]
