# -*- coding: utf-8 -*-
"""UnitsHost backed by the live Revit API. Only importable inside Revit."""

import clr

clr.AddReference("RevitAPI")
from Autodesk.Revit.DB import (
    DisciplineTypeId, ForgeTypeId, FormatOptions as DBFormatOptions,
    LabelUtils, UnitUtils
)
from Autodesk.Revit.Exceptions import ArgumentException

from unitsreport.host import (
    DefaultOptions, Discipline, FormatOptions, LabelUnavailable,
    Spec, Symbol, Unit, UnitsHost
)


def _forge(identifier):
    return ForgeTypeId(identifier.type_id)


class RevitUnitsHost(UnitsHost):

    def default_discipline(self):
        return Discipline(DisciplineTypeId.Common.TypeId)

    def all_disciplines(self):
        return [Discipline(d.TypeId) for d in UnitUtils.GetAllDisciplines()]

    def discipline_label(self, discipline):
        return LabelUtils.GetLabelForDiscipline(_forge(discipline))

    def measurable_specs(self):
        return [Spec(s.TypeId) for s in UnitUtils.GetAllMeasurableSpecs()]

    def discipline_of(self, spec):
        return Discipline(UnitUtils.GetDiscipline(_forge(spec)).TypeId)

    def spec_label(self, spec):
        return LabelUtils.GetLabelForSpec(_forge(spec))

    def unit_label(self, unit):
        return LabelUtils.GetLabelForUnit(_forge(unit))

    def symbol_label(self, symbol):
        # Empty symbols and symbols without a label both raise here.
        try:
            return LabelUtils.GetLabelForSymbol(_forge(symbol))
        except ArgumentException as err:
            raise LabelUnavailable("{}: {}".format(symbol.type_id, err.Message))

    def format_options(self, document, spec):
        spec_id = _forge(spec)
        options = document.GetUnits().GetFormatOptions(spec_id)
        return FormatOptions(
            unit=Unit(options.GetUnitTypeId().TypeId),
            symbol=Symbol(options.GetSymbolTypeId().TypeId),
            rounding_method=str(options.RoundingMethod),
            use_digit_grouping=options.UseDigitGrouping,
            use_default=options.UseDefault,
            valid_for_spec=options.IsValidForSpec(spec_id),
            has_symbol=options.CanHaveSymbol(),
            suppress_spaces=options.SuppressSpaces,
            suppress_leading_zeros=options.SuppressLeadingZeros,
            suppress_trailing_zeros=options.SuppressTrailingZeros,
            use_plus_prefix=options.UsePlusPrefix,
            accuracy=options.Accuracy,
        )

    def default_options(self, unit):
        unit_id = _forge(unit)
        return DefaultOptions(
            can_have_symbol=DBFormatOptions.CanHaveSymbol(unit_id),
            can_suppress_spaces=DBFormatOptions.CanSuppressSpaces(unit_id),
            can_suppress_leading_zeros=DBFormatOptions.CanSuppressLeadingZeros(unit_id),
            can_suppress_trailing_zeros=DBFormatOptions.CanSuppressTrailingZeros(unit_id),
            can_use_plus_prefix=DBFormatOptions.CanUsePlusPrefix(unit_id),
        )

    def valid_symbols(self, unit):
        return [Symbol(s.TypeId) for s in DBFormatOptions.GetValidSymbols(_forge(unit))]

    def is_valid_accuracy(self, unit, accuracy):
        return DBFormatOptions.IsValidAccuracy(_forge(unit), accuracy)

    def is_valid_symbol(self, unit, symbol):
        return DBFormatOptions.IsValidSymbol(_forge(unit), _forge(symbol))
