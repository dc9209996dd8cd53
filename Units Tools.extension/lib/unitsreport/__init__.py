# -*- coding: utf-8 -*-
"""Export the active document's unit settings for one discipline as JSON."""

__version__ = "1.0.0"
