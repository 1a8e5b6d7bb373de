"""Core IR and rendering rules shared by every formatter.

WHY: The core package holds the stable heart of the exporter: the IR
dataclasses and the timestamp and segment grouping rules. Formatters
depend on it; it depends on nothing format-specific.

HOW: ir.py defines the data structures, timestamps.py the display and
SRT time formats, grouping.py the per-segment render lines.

RULES:
- IR dataclasses are the contract; change with care
- No formatter-specific logic here
"""
