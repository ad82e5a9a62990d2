"""Remote Stats -- locomotive telemetry on a remote control's coupler display.

Encodes fuel, oil, sand and engine-temperature gauges into compact
``"<glyph>:<code>"`` strings and cycles the operator's selection
through the readings of the paired locomotive.
"""

__version__ = "0.1.0"
