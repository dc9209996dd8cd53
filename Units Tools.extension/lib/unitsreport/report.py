# -*- coding: utf-8 -*-
"""
Builds the per-discipline units report.

One ``SpecRecord`` per measurable spec of the discipline. A spec that fails
anywhere outside the symbol-label lookups is dropped and logged; it never
takes the rest of the report down with it.
"""

import logging

from unitsreport.host import LabelUnavailable

_logger = logging.getLogger(__name__)


def symbol_label(host, symbol):
    """Label for ``symbol``, or an empty string when the host has none."""
    try:
        return host.symbol_label(symbol)
    except LabelUnavailable:
        return ""


class SpecRecord(object):
    def __init__(self, spec, label, unit, unit_label, default_options,
                 format_options, accuracy_valid, valid_symbols,
                 symbol_label, symbol_valid):
        self.spec = spec
        self.label = label
        self.unit = unit
        self.unit_label = unit_label
        self.default_options = default_options
        self.format_options = format_options
        self.accuracy_valid = accuracy_valid
        self.valid_symbols = valid_symbols
        self.symbol = format_options.symbol
        self.symbol_label = symbol_label
        self.symbol_valid = symbol_valid

    def to_dict(self):
        defaults = self.default_options
        options = self.format_options
        return {
            self.label: {
                "SpecTypeId": self.spec.type_id,
                self.unit_label: {
                    "UnitTypeId": self.unit.type_id,
                    "DefaultOptions": {
                        "CanHaveSymbol": defaults.can_have_symbol,
                        "CanSuppressSpaces": defaults.can_suppress_spaces,
                        "CanSuppressLeadingZeros": defaults.can_suppress_leading_zeros,
                        "CanSuppressTrailingZeros": defaults.can_suppress_trailing_zeros,
                        "CanUsePlusPrefix": defaults.can_use_plus_prefix,
                    },
                    "SetFormatOptions": {
                        "RoundingMethod": options.rounding_method,
                        "UseDigitGrouping": options.use_digit_grouping,
                        "UseDefaultFormatting": options.use_default,
                        "AreFormatOptionsValidForSpec": options.valid_for_spec,
                        "HasSymbol": options.has_symbol,
                        "SuppressSpaces": options.suppress_spaces,
                        "SuppressLeadingZeros": options.suppress_leading_zeros,
                        "SuppressTrailingZeros": options.suppress_trailing_zeros,
                        "UsePlusPrefix": options.use_plus_prefix,
                        "SetAccuracy": {
                            "Value": options.accuracy,
                            "IsValidAccuracy": self.accuracy_valid,
                        },
                        "ValidSymbols": [
                            {"SymbolTypeId": symbol.type_id, "SymbolLabel": label}
                            for symbol, label in self.valid_symbols
                        ],
                    },
                },
                "SetSymbol": {
                    "SymbolTypeId": self.symbol.type_id,
                    "SymbolLabel": self.symbol_label,
                    "IsValidSymbol": self.symbol_valid,
                },
            }
        }


class Report(object):
    def __init__(self, discipline, label, specs=None, skipped=None):
        self.discipline = discipline
        self.label = label
        self.specs = specs or []
        # (spec, message) pairs; kept for the caller, never serialized
        self.skipped = skipped or []

    def to_dict(self):
        return {
            self.label: {
                "DisciplineTypeId": self.discipline.type_id,
                "Specs": [record.to_dict() for record in self.specs],
            }
        }


def specs_for_discipline(host, discipline):
    """Measurable specs whose discipline is exactly ``discipline``, in host order."""
    return [spec for spec in host.measurable_specs()
            if host.discipline_of(spec) == discipline]


def build_spec_record(host, document, spec):
    label = host.spec_label(spec)
    options = host.format_options(document, spec)
    unit = options.unit
    unit_label = host.unit_label(unit)
    set_symbol_label = symbol_label(host, options.symbol)
    defaults = host.default_options(unit)
    accuracy_valid = host.is_valid_accuracy(unit, options.accuracy)
    valid_symbols = [(symbol, symbol_label(host, symbol))
                     for symbol in host.valid_symbols(unit)]
    symbol_valid = host.is_valid_symbol(unit, options.symbol)

    return SpecRecord(
        spec, label, unit, unit_label, defaults, options,
        accuracy_valid, valid_symbols, set_symbol_label, symbol_valid,
    )


def build_report(discipline, document, host, logger=None):
    """Collect every spec of ``discipline`` as configured in ``document``."""
    logger = logger or _logger
    report = Report(discipline, host.discipline_label(discipline))

    for spec in specs_for_discipline(host, discipline):
        try:
            record = build_spec_record(host, document, spec)
        except Exception as err:
            logger.error("Skipping spec {}: {}".format(spec.type_id, err))
            report.skipped.append((spec, str(err)))
            continue
        report.specs.append(record)

    logger.debug("{}: {} specs, {} skipped".format(
        report.label, len(report.specs), len(report.skipped)))
    return report
