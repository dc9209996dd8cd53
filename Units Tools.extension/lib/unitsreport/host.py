# -*- coding: utf-8 -*-
"""
Value types for host identifiers and the adapter every unit-data source implements.

The host (Revit) owns the label, validity and formatting tables. Nothing here
tries to reproduce them; ``UnitsHost`` only names the questions the report asks.
"""

from collections import namedtuple


class HostError(Exception):
    """Base class for errors raised by a ``UnitsHost``."""


class LabelUnavailable(HostError):
    """The host has no display label for an identifier in the current context."""


class _TypeId(namedtuple("_TypeId", ["type_id"])):
    __slots__ = ()

    def __str__(self):
        return self.type_id


class Discipline(_TypeId):
    __slots__ = ()


class Spec(_TypeId):
    __slots__ = ()


class Unit(_TypeId):
    __slots__ = ()


class Symbol(_TypeId):
    __slots__ = ()


DefaultOptions = namedtuple("DefaultOptions", [
    "can_have_symbol",
    "can_suppress_spaces",
    "can_suppress_leading_zeros",
    "can_suppress_trailing_zeros",
    "can_use_plus_prefix",
])

FormatOptions = namedtuple("FormatOptions", [
    "unit",
    "symbol",
    "rounding_method",
    "use_digit_grouping",
    "use_default",
    "valid_for_spec",
    "has_symbol",
    "suppress_spaces",
    "suppress_leading_zeros",
    "suppress_trailing_zeros",
    "use_plus_prefix",
    "accuracy",
])


class UnitsHost(object):
    """Read-only questions asked of the host's unit subsystem.

    Document-scoped calls take the document explicitly; everything else is
    global to the host session.
    """

    def default_discipline(self):
        raise NotImplementedError

    def all_disciplines(self):
        raise NotImplementedError

    def discipline_label(self, discipline):
        raise NotImplementedError

    def measurable_specs(self):
        raise NotImplementedError

    def discipline_of(self, spec):
        raise NotImplementedError

    def spec_label(self, spec):
        raise NotImplementedError

    def unit_label(self, unit):
        raise NotImplementedError

    def symbol_label(self, symbol):
        """Return the label for ``symbol`` or raise ``LabelUnavailable``."""
        raise NotImplementedError

    def format_options(self, document, spec):
        """Return a ``FormatOptions`` snapshot of the document's settings for ``spec``."""
        raise NotImplementedError

    def default_options(self, unit):
        raise NotImplementedError

    def valid_symbols(self, unit):
        raise NotImplementedError

    def is_valid_accuracy(self, unit, accuracy):
        raise NotImplementedError

    def is_valid_symbol(self, unit, symbol):
        raise NotImplementedError


def active_document(uiapp):
    """Document of the active UI document, or None when nothing is open."""
    uidoc = uiapp.ActiveUIDocument
    if uidoc is None:
        return None
    return uidoc.Document
