# -*- coding: utf-8 -*-
# Export Units - Settings Button
#
# Picks the discipline to export and the folder result.json is written to.

from pyrevit import forms

from unitsreport import config
from unitsreport.revit_host import RevitUnitsHost

host = RevitUnitsHost()
settings = config.load_settings()

# Let user pick (or re-pick) the discipline
labels = {}
for discipline in host.all_disciplines():
    labels[host.discipline_label(discipline)] = discipline

choice = forms.SelectFromList.show(
    sorted(labels.keys()),
    title="Discipline to export",
    multiselect=False
)
if choice:
    settings.discipline = labels[choice].type_id

settings.update_output_folder(forms.pick_folder(title="Select folder for result.json"))

config.save_settings(settings)
forms.alert("Discipline: {}\nOutput:\n{}".format(
    choice or "unchanged", config.output_path(settings)))
