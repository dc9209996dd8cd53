# -*- coding: utf-8 -*-
import io
import json

INDENT = 2


def to_json(report):
    return json.dumps(report.to_dict(), indent=INDENT, ensure_ascii=False)


def write_report(report, path):
    """Overwrite ``path`` with the report as UTF-8 JSON and return the text."""
    text = to_json(report)
    with io.open(path, "w", encoding="utf-8") as stream:
        stream.write(text)
    return text
