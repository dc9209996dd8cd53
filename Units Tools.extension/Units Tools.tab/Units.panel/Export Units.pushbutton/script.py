# -*- coding: utf-8 -*-
__title__   = 'Export Units'
__tooltip__ = 'Write the document\'s unit settings for one discipline to result.json'
__version__ = '1.0.0'

from pyrevit import forms
from pyrevit import script

from unitsreport import config
from unitsreport.host import active_document
from unitsreport.report import build_report
from unitsreport.revit_host import RevitUnitsHost
from unitsreport.writer import write_report

logger = script.get_logger()
output = script.get_output()

doc = active_document(__revit__)
if not doc:
    forms.alert("No active document.", exitscript=True)

host = RevitUnitsHost()
settings = config.load_settings()
discipline = settings.discipline_id(host, logger=logger)

report = build_report(discipline, doc, host, logger=logger)

output_path = config.output_path(settings)
try:
    result = write_report(report, output_path)
except (IOError, OSError) as err:
    forms.alert("Could not write {}:\n{}".format(output_path, err), exitscript=True)

logger.debug(result)

print("✅ Exported {} specs for {} to:\n{}".format(len(report.specs), report.label, output_path))
if report.skipped:
    output.print_md("**Skipped {} specs:**".format(len(report.skipped)))
    for spec, message in report.skipped:
        print("- {}: {}".format(spec.type_id, message))
